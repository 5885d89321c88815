def ensure_scheme(url: str) -> str:
    """Strip ``url`` and prefix ``https://`` when it has no scheme."""
    url = url.strip()
    if "://" not in url:
        url = f"https://{url}"
    return url
