import re
from typing import Any, Mapping, Sequence

_PLACEHOLDER = re.compile(r"\{([\w.]+)\}")


def stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _lookup(node: Any, key: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(key)
    if isinstance(node, Sequence) and not isinstance(node, str) and key.isdecimal():
        index = int(key)
        return node[index] if index < len(node) else None
    return None


def interpolate(
    template: str,
    variables: Mapping[str, Any],
    *,
    default_value: str = "",
) -> str:
    """Replace ``{key}`` and ``{key.sub.path}`` placeholders in a template.

    Each placeholder is resolved by walking ``variables`` one dotted segment at a
    time. Digit segments index into lists, so ``{items.0}`` reads the first
    item. A missing segment or a ``None`` value resolves to ``default_value``.

    Args:
        template (str): The string containing placeholders.
        variables (Mapping[str, Any]): Flat or nested replacement values.
        default_value (str): Substituted for placeholders that cannot be resolved.

    Returns:
        str: The template with every placeholder substituted.

    Examples:
        ```python
        interpolate("/projects/{project.id}/issues", {"project": {"id": 7}})
        # "/projects/7/issues"
        ```
    """

    def _replace(match: re.Match[str]) -> str:
        value: Any = variables
        for key in match.group(1).split("."):
            value = _lookup(value, key)
            if value is None:
                return default_value
        return stringify(value)

    return _PLACEHOLDER.sub(_replace, template)
