"""Startup gate: exit non-zero when the host fails the security checks.

Usage:
    python -m cryptoprobe
"""

import json
import logging
import sys

from .errors import InsecureSystemError
from .verifier import SecurityVerifier


def main() -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    verifier = SecurityVerifier()
    try:
        verifier.assert_secure_system()
    except InsecureSystemError as e:
        print(e.message, file=sys.stderr)
        return 1

    output = {
        "secure": True,
        "provider": verifier.provider,
        "algorithm": verifier.algorithm,
        "minimumKeyLength": verifier.minimum_key_length,
    }
    print(json.dumps(output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
