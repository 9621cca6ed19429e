#!/usr/bin/env python3
"""Fetch ORCID works as JSON.

This is a thin wrapper around the orcid_works package for running from a
source checkout: ``python run_works.py --orcid ... [--mode stats]``.
"""

from orcid_works.cli import main

if __name__ == "__main__":
    main()
