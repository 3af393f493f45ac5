import json
from typing import Any, Iterable, Optional, Sequence

import click


def parse_pairs(
    values: Iterable[str], option: str, separators: Sequence[str] = ("=",)
) -> dict[str, str]:
    """Parse repeated `key=value` options, keeping their order.

    The first separator in `separators` present in a value is used, so headers
    can be given as `Name: value` even when the value contains `=`.
    """
    pairs: dict[str, str] = {}
    for raw in values:
        separator = next((sep for sep in separators if sep in raw), None)
        if separator is None:
            raise click.BadParameter(
                f"'{raw}' is not in key{separators[0]}value form.", param_hint=option
            )
        key, value = raw.split(separator, 1)
        key = key.strip()
        if not key:
            raise click.BadParameter(f"'{raw}' has an empty key.", param_hint=option)
        pairs[key] = value.strip()
    return pairs


def load_body(data: Optional[str], file: Optional[str]) -> Any:
    """Read the request body from `--data` or `--file` as JSON."""
    if data is not None and file is not None:
        raise click.UsageError("Use either --data or --file, not both.")

    if file is not None:
        with open(file, encoding="utf-8") as f:
            data = f.read()

    if data is None:
        return None

    try:
        return json.loads(data)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Body is not valid JSON: {e}") from e
