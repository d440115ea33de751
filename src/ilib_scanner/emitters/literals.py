"""
JavaScript string literal quoting shared by the emitters.
"""

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r"}


def js_str(value: str, quote: str = "'") -> str:
  """
  Quotes a value as a JavaScript string literal.

  Args:
      value: The raw text.
      quote: The delimiter, `'` or `"`.

  Returns:
      str: The literal, including its delimiters.
  """
  escaped = "".join(_ESCAPES.get(ch, "\\" + ch if ch == quote else ch) for ch in value)
  return f"{quote}{escaped}{quote}"
