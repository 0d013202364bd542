"""Helper utilities"""
import re
from typing import List, Optional

QUOTED_LITERAL = re.compile(r'"([^"]*)"')


def quoted_literals(text: str) -> List[str]:
    """All double-quoted substrings of text, quotes stripped"""
    return QUOTED_LITERAL.findall(text)


def first_quoted(text: str, default: Optional[str] = None) -> Optional[str]:
    """First double-quoted substring of text, or default"""
    match = QUOTED_LITERAL.search(text)
    return match.group(1) if match else default


def js_string(value: str) -> str:
    """Single-quoted JavaScript string literal"""
    escaped = (str(value)
               .replace('\\', '\\\\')
               .replace("'", "\\'")
               .replace('\n', '\\n')
               .replace('\r', '\\r')
               .replace('\x00', '\\x00')
               .replace('\u2028', '\\u2028')
               .replace('\u2029', '\\u2029'))
    return f"'{escaped}'"


def py_string(value: str) -> str:
    """Python string literal"""
    return repr(str(value))


def css_text(value: str) -> str:
    """Escape text for a double-quoted :has-text() argument"""
    return str(value).replace('\\', '\\\\').replace('"', '\\"')


def to_identifier(name: str, default: str = "scenario") -> str:
    """Turn free text into a snake_case Python identifier fragment"""
    slug = re.sub(r'\W+', '_', name.lower()).strip('_')
    # \w also accepts characters like '²' that are not valid in identifiers
    if not f"x{slug}".isidentifier():
        slug = re.sub(r'[^0-9a-z]+', '_', slug).strip('_')
    return slug or default


def to_class_name(name: str, default: str = "Feature") -> str:
    """Turn free text into a PascalCase class name"""
    words = re.findall(r'[0-9A-Za-z]+', name)
    class_name = ''.join(word[:1].upper() + word[1:] for word in words)
    if not class_name:
        return default
    if class_name[0].isdigit():
        class_name = f"{default}{class_name}"
    return class_name
