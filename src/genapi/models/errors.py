class BaseUrlMissingError(Exception):
    def __init__(
        self,
        message="Base URL required. Please set \033[1mGENAPI_URL\033[22m.",
    ):
        self.message = message
        super().__init__(self.message)


class CredentialsMissingError(Exception):
    def __init__(
        self,
        message="Credentials missing or malformed for the configured auth scheme "
        "(\033[1mGENAPI_AUTH_KIND\033[22m).",
    ):
        self.message = message
        super().__init__(self.message)
