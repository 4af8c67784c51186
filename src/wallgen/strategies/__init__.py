from wallgen.strategies.creative import CreativeStrategy
from wallgen.strategies.styles import StyleStrategy

__all__ = ["CreativeStrategy", "StyleStrategy"]
