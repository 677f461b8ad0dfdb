#!/usr/bin/env python3
"""
Complete Resolution Demo: value tree → analysis → per-aspect output → browser data

Shows the full workflow:
1. Build example declarations
2. Analyze which aspects they carry
3. Resolve them for each vendor prefix and for legacy output
4. Query the browser data the host consults
"""

from crossbrowser.analyzer import analyze_value, aspect_inventory
from crossbrowser.examples import build_example_declarations
from crossbrowser.functions import registry
from crossbrowser.values import List, String, quoted_string


def main():
    declarations = build_example_declarations()

    print("=" * 80)
    print("RESOLUTION DEMO: values → analysis → prefixed output → browser data")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Analyze
    # =========================================================================
    print("\n1. ANALYZING VALUES...")
    for prop, value in declarations.items():
        metrics = analyze_value(value)
        print(f"   ✓ {prop}: depth={metrics.depth} nodes={metrics.node_count} "
              f"aspects={sorted(metrics.aspects) or '-'}")
        inventory = aspect_inventory(value)
        if inventory:
            print(f"     leaves per aspect: {inventory}")

    # =========================================================================
    # STEP 2: Resolve
    # =========================================================================
    print("\n2. RESOLVING...")
    for prop, value in declarations.items():
        # prefixed() asks the values it is given, so hand it the list members
        members = value.items if isinstance(value, List) else (value,)
        for token in ("-webkit", "-moz", "-o", "-ms"):
            if registry.call("prefixed", String(token), *members).value:
                resolved = registry.call("prefix", String(token), value)
                print(f"   {token}: {prop}: {resolved};")
        print(f"   {prop}: {value};")
        legacy = registry.call("-css2", value)
        if legacy != value:
            print(f"   (legacy) {prop}: {legacy};")

    # =========================================================================
    # STEP 3: Browser data
    # =========================================================================
    print("\n3. BROWSER DATA:")
    print("-" * 80)
    print(f"   Browsers: {registry.call('browsers')}")
    print(f"   Capabilities: {registry.call('browser-capabilities')}")
    print(f"   Webkit browsers: {registry.call('browsers', String('-webkit'))}")
    print(f"   Gradient minimums: {registry.call('browser-minimums', String('css-gradients'))}")
    print(f"   Usage relying on -webkit gradients: "
          f"{registry.call('prefix-usage', String('-webkit'), String('css-gradients'))}%")
    print(f"   Usage omitted by requiring IE 10: "
          f"{registry.call('omitted-usage', String('ie'), quoted_string('10'))}%")

    print("\n" + "=" * 80)
    print("DEMO COMPLETE!")
    print("=" * 80)


if __name__ == "__main__":
    main()
