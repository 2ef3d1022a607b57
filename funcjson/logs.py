from .jsontypes import Headers


def request_repr(
    method: str,
    url: str,
    headers: Headers,
    sensitive_headers: set[str] | None = None,
) -> str:
    if sensitive_headers is None:
        sensitive_headers = set()

    return str(
        {
            "method": method,
            "url": url,
            "headers": masked_headers(headers, sensitive_headers),
        },
    )


def masked_headers(
    headers: Headers,
    sensitive_headers: set[str],
) -> dict[str, str]:
    return {
        header: masked_header_value(header, value, sensitive_headers)
        for header, value in headers.items()
    }


def masked_header_value(
    header: str,
    value: str | bytes,
    sensitive_headers: set[str],
) -> str:
    if isinstance(value, bytes):
        value = value.decode()

    if header.lower() in {name.lower() for name in sensitive_headers}:
        length = len(value)
        begin = value[:10]
        return f"{begin}*** ({length} chars)"

    return value
