#!/usr/bin/env python3
"""Main entry point for the TV tuner application."""

import logging
import os

from .core.tuner import DuplicateFrequencyPolicy
from .ui.app import TVApp, setup_logging

POLICY_ENV_VAR = "TVTUNER_DUPLICATE_POLICY"


def duplicate_policy_from_env() -> DuplicateFrequencyPolicy:
    """Read the duplicate frequency policy from the environment, defaulting to allow."""
    value = os.environ.get(POLICY_ENV_VAR, DuplicateFrequencyPolicy.ALLOW.value)
    try:
        return DuplicateFrequencyPolicy(value.strip().lower())
    except ValueError:
        logging.warning(f"Unknown {POLICY_ENV_VAR} '{value}', allowing duplicate frequencies.")
        return DuplicateFrequencyPolicy.ALLOW


def main():
    """Run the TV tuner application."""
    setup_logging()

    # Run the application
    app = TVApp(duplicate_policy=duplicate_policy_from_env())
    app.run()


if __name__ == "__main__":
    main()
