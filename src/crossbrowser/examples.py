"""
Example value trees for demos and tests.

Builds the kind of values a stylesheet host hands over when a mixin
declares a gradient background with vendor alternates and a flexbox
display with a legacy fallback.
"""
from crossbrowser.aspects import FallbackValue, PrefixedValue
from crossbrowser.values import List, Number, Separator, String


def build_example_gradient(prefixes=("webkit", "moz", "o")) -> PrefixedValue:
    body = "linear-gradient(top, #fff, #000)"
    return PrefixedValue(
        base=String(body),
        renderings={p: String(f"-{p}-{body}") for p in prefixes},
    )


def build_example_background() -> List:
    """
    url(bg.png) no-repeat, linear-gradient(...)

    A comma list whose second layer is the prefixed gradient.
    """
    image_layer = List(
        (String("url(bg.png)"), String("no-repeat")),
        Separator.SPACE,
    )
    return List((image_layer, build_example_gradient()), Separator.COMMA)


def build_example_display() -> FallbackValue:
    return FallbackValue(primary=String("flex"), legacy=String("block"))


def build_example_declarations():
    """Property name -> value, as a host would hold a small rule set."""
    return {
        "background": build_example_background(),
        "display": build_example_display(),
        "margin": List((Number(0), String("auto")), Separator.SPACE),
    }
