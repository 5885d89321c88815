import json
from pathlib import Path

from ringkas.processing.exceptions import PromptLoadError

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


def load_prompt_template(name: str, path: Path | None = None) -> str:
    """Load a prompt template.

    Args:
        name: Template name; resolves to ``templates/<name>_prompt.txt``.
        path: Explicit file to read instead of the bundled template.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_TEMPLATE_DIR / f"{name}_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(name: str, path: Path | None = None) -> dict[str, object]:
    """Load and parse a JSON schema (``templates/<name>_schema.json`` by default).

    Raises:
        PromptLoadError: if the file cannot be read or is not a JSON object.
    """
    if path is None:
        path = _DEFAULT_TEMPLATE_DIR / f"{name}_schema.json"
    try:
        schema = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise PromptLoadError(f"Failed to load JSON schema: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise PromptLoadError(f"Invalid JSON schema in {path.name}: {exc}") from exc
    if not isinstance(schema, dict):
        raise PromptLoadError(f"JSON schema in {path.name} must be an object")
    return schema
