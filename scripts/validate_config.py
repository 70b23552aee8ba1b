#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Any, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from meff_app.config.loader import ConfigLoader
from meff_app.config.validation import ConfigValidator, ValidationError


def validate_provider_config(overrides: Optional[dict[str, Any]] = None) -> list[ValidationError]:
    """Validate the merged provider configuration."""
    loader = ConfigLoader.create()
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    loader = ConfigLoader.create()
    print(f"🔍 Validating MEFF App configuration ({loader.config_dir / 'provider.yaml'})...")

    all_valid = True

    try:
        errors = validate_provider_config()
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print("✅ Provider configuration is valid")
    except Exception as e:
        print(f"❌ Error validating provider configuration: {e}")
        all_valid = False

    print("\n📋 Testing call-level overrides...")
    test_overrides = {
        "connectivity": {
            "probe_ticker": "SAN",
            "probe_date": "2011-01-31",
        }
    }

    try:
        errors = validate_provider_config(test_overrides)
        if errors:
            print("❌ Override validation failed:")
            for error in errors:
                print(f"  • {error.field}: {error.message}")
            all_valid = False
        else:
            print("✅ Override validation passed")
    except Exception as e:
        print(f"❌ Error testing overrides: {e}")
        all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
