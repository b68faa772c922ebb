from .registry import Registry


def create_default_registries() -> dict[str, Registry]:
    """Create registries for generation strategies and package policies."""
    strategy_registry = Registry(name="strategy")
    strategy_registry.register(
        "ai-centric",
        "This solution MUST leverage UiPath AI services (like AI Center, Document Understanding, "
        "Computer Vision, etc.) where appropriate.",
    )
    strategy_registry.register(
        "traditional",
        "This solution MUST AVOID AI services and use traditional, rule-based automation techniques "
        "(e.g., string manipulation, selectors, data scraping, Find Image, OCR).",
    )

    package_policy_registry = Registry(name="package_policy")
    package_policy_registry.register("official", "Official Packages Only")
    package_policy_registry.register("marketplace", "Allow Marketplace Packages")

    return {
        "strategy": strategy_registry,
        "package_policy": package_policy_registry,
    }
