#!/usr/bin/env python3
"""
World ID State Bridge Deployment Tool - Configuration Store

Persists the resolved deployment configuration as a flat JSON object so a
later run can resume after a failed step. The forge scripts read the same
file, which is why it is saved before every deployment step.
"""

import json
import pathlib
from typing import Any, Dict, Mapping
from .formatter import *
from .prompt import ask

CONFIG_FILENAME = "src/script/.deploy-config.json"


class ConfigStore:
    def __init__(self, path=CONFIG_FILENAME):
        self.path = pathlib.Path(path)

    def load(self, use_stored_config: bool) -> Dict[str, Any]:
        """Optionally reload the configuration saved by a prior run"""
        if not use_stored_config:
            return {}

        answer = ask("Do you want to load configuration from prior runs? [Y/n]: ", bool)
        print_step("Configuration Loading")
        if answer is None:
            answer = True

        if not answer:
            print_success("Configuration not loaded")
            return {}

        if not self.path.exists():
            print_warning("Configuration load requested but no configuration available: continuing")
            return {}

        try:
            with open(self.path, 'r') as f:
                contents = json.load(f)
        except (OSError, ValueError):
            contents = None

        if not isinstance(contents, dict):
            print_warning("Unable to parse configuration: deleting and continuing")
            self.path.unlink(missing_ok=True)
            return {}

        print_success("Configuration loaded")
        return contents

    def read(self) -> Dict[str, Any]:
        """Read the saved configuration, treating any failure as empty"""
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, config: Mapping[str, Any]) -> None:
        """Merge config over the saved configuration and write it back"""
        data = {**self.read(), **config}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w') as f:
            json.dump(data, f, indent=2)
