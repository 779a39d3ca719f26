#!/usr/bin/env python3
"""CLI helper: print the resolved chatbot provider setup (env > config > default).

Usage: python scripts/print_provider_config.py [provider...]

With no arguments, prints the configured provider summary. With provider
names, prints the endpoint each of them would resolve to. The credential is
never printed, only whether it is set. Exits 1 if a named provider has no URL.
"""
import sys

from config_manager import get_config_summary, load_config, provider_config
from utils.provider_resolver import resolve_provider_url, validate_providers


def main(argv):
    cfg = load_config()
    names = argv[1:]
    if not names:
        for key, value in get_config_summary(cfg).items():
            print(f"{key}: {value}")
        return 0

    provider = provider_config(cfg)
    found = validate_providers(provider, names)
    for name in names:
        print(f"{name}: {resolve_provider_url(name, provider) or '(unresolved)'}")
    return 0 if all(found.values()) else 1


if __name__ == '__main__':
    sys.exit(main(sys.argv))
