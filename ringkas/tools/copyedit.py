async def copyedit(text: str) -> str:
    """Refine text before it is returned; currently trims surrounding whitespace."""
    return text.strip()
