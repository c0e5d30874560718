#!/usr/bin/env python3
"""SendGrid Payload Builder - Entry point."""
import sys
import os

# Run from a checkout without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sendgrid_payload.cli.commands import main


if __name__ == "__main__":
    main()
