#!/usr/bin/env python3
"""
SQUAD Quick Start - Installation Verification
=============================================

Run: python quickstart.py

Loads the sample configuration and evaluates a quarter turn about X,
checking that the curve starts and ends on its keyframes.
"""

import sys
from pathlib import Path

# Project root setup
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))


def report(name, passed, details=None):
    status = "[OK]" if passed else "[FAIL]"
    print(f"  {status} {name}")
    if details:
        print(f"       {details}")
    return passed


def load_sample_config():
    """Load config/squad_config.yaml through the config manager."""
    from squad.config import SquadConfigManager

    try:
        config = SquadConfigManager(PROJECT_ROOT).load_config("squad_config.yaml")
    except (OSError, ValueError) as e:
        return report("Sample configuration", False, str(e))
    return report("Sample configuration", True,
                  f"policy={config.unit_norm_policy}, output={config.output_format}")


def check_sample_segment():
    """Evaluate identity -> 90 degrees about X with repeated neighbours."""
    import numpy as np
    from squad import build_interpolator

    identity = [1.0, 0.0, 0.0, 0.0]
    quarter_x = [np.cos(np.pi / 4), np.sin(np.pi / 4), 0.0, 0.0]
    interpolator = build_interpolator(identity, identity, quarter_x, quarter_x)

    mid = interpolator(0.5)
    endpoints_ok = (np.allclose(interpolator(0.0), identity, atol=1e-6)
                    and np.allclose(interpolator(1.0), quarter_x, atol=1e-6))
    return report("Segment endpoints", endpoints_ok,
                  f"midpoint [{mid.w:+.4f}, {mid.x:+.4f}, {mid.y:+.4f}, {mid.z:+.4f}]")


def main():
    print("=" * 60)
    print("  SQUAD Quick Start - Installation Verification")
    print("=" * 60)

    try:
        results = [load_sample_config(), check_sample_segment()]
    except ImportError as e:
        report("Imports", False, f"{e} (try: pip install -e .[test])")
        sys.exit(1)

    if all(results):
        print("\n  All checks passed. Next: python examples/01_squad_segment.py")
    else:
        print("\n  Some checks failed. Please review the errors above.")
        sys.exit(1)


if __name__ == "__main__":
    main()
