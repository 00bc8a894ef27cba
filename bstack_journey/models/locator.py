"""
Locator Value Type

FLOW OVERVIEW
- Locator(strategy, value, description)
  • Immutable description of how to find DOM elements.
  • Named constructors: by_id, by_css, by_xpath, by_text, by_text_contains,
    by_class_fragment.
  • as_tuple() returns the (By, value) pair Selenium's find_element and
    expected_conditions accept.
- xpath_literal(text)
  • Quote arbitrary text for use inside an XPath expression.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from selenium.webdriver.common.by import By


def xpath_literal(text: str) -> str:
    """Return `text` as an XPath string literal, handling embedded quotes."""
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    parts = text.split("'")
    return "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"


@dataclass(frozen=True)
class Locator:
    """How to find one or more elements on the page"""
    strategy: str
    value: str
    description: Optional[str] = None

    def __str__(self):
        return self.description or f"{self.strategy}={self.value}"

    def as_tuple(self) -> Tuple[str, str]:
        return (self.strategy, self.value)

    @classmethod
    def by_id(cls, element_id: str, description: Optional[str] = None) -> 'Locator':
        return cls(By.ID, element_id, description or f"#{element_id}")

    @classmethod
    def by_css(cls, selector: str, description: Optional[str] = None) -> 'Locator':
        return cls(By.CSS_SELECTOR, selector, description)

    @classmethod
    def by_xpath(cls, expression: str, description: Optional[str] = None) -> 'Locator':
        return cls(By.XPATH, expression, description)

    @classmethod
    def by_text(cls, text: str, tag: str = '*', description: Optional[str] = None) -> 'Locator':
        """Element whose own text equals `text` exactly."""
        return cls(By.XPATH, f"//{tag}[text()={xpath_literal(text)}]",
                   description or f"{tag} with text '{text}'")

    @classmethod
    def by_text_contains(cls, text: str, tag: str = '*', description: Optional[str] = None) -> 'Locator':
        """Element whose own text contains `text`."""
        return cls(By.XPATH, f"//{tag}[contains(text(), {xpath_literal(text)})]",
                   description or f"{tag} containing text '{text}'")

    @classmethod
    def by_class_fragment(cls, fragment: str, tag: str = '*', description: Optional[str] = None) -> 'Locator':
        """Element whose class attribute contains `fragment`."""
        return cls(By.XPATH, f"//{tag}[contains(@class, {xpath_literal(fragment)})]",
                   description or f"{tag} with class containing '{fragment}'")
