class Endpoint(str):
    """A string subclass representing a normalized API endpoint path.

    This class ensures consistent endpoint formatting by adding a leading slash
    if missing. Trailing slashes are significant to many APIs and are kept.

    Examples:
        >>> endpoint = Endpoint("projects")
        >>> str(endpoint)
        '/projects'

    Args:
        endpoint (str): The endpoint path to normalize.
    """

    def __new__(cls, endpoint: str) -> "Endpoint":
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"

        return super().__new__(cls, endpoint)

    def __repr__(self) -> str:
        return f"Endpoint({super().__str__()!r})"
