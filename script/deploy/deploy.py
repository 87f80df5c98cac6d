#!/usr/bin/env python3
"""
World ID State Bridge Deployment Tool

Deploys the World ID state bridge and its L2 World ID contracts:
- Deployment parameters from prior runs, environment variables (.env) or prompts
- Configuration saved to src/script/.deploy-config.json between steps
- Contract deployment and verification via forge script
"""

import argparse
import pathlib
import sys
import traceback
from typing import List, Optional
from dotenv import load_dotenv
from bridge_deploy.formatter import *
from bridge_deploy.config_store import ConfigStore
from bridge_deploy.plan import Plan, PlanRunner
from bridge_deploy.runner import CommandOutput, ForgeRunner
from bridge_deploy.scenarios import SCENARIOS, Scenario, build_plan

LOG_DIR = "src/script/logs"


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deploy.py",
        description="A CLI interface for deploying the WorldID state bridge.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
IMPORTANT:
  - This script is designed to be run from the root directory of the project.
  - Values are taken from the saved configuration, then the environment (.env),
    then asked for interactively.

Examples:
  python3 script/deploy/deploy.py deploy
  python3 script/deploy/deploy.py deploy-testnet --no-config
  python3 script/deploy/deploy.py --no-config mock
  PRIVATE_KEY=0x... ETH_RPC_URL=... python3 script/deploy/deploy.py local-mock
  python3 script/deploy/deploy.py set-op-gas-limit
  python3 script/deploy/deploy.py show-config
        """
    )
    parser.add_argument("--no-config", dest="use_config", action="store_false",
                        help="Do not use any existing configuration.")

    # Also accepted after the subcommand; SUPPRESS keeps the top-level value otherwise
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--no-config", dest="use_config", action="store_false",
                        default=argparse.SUPPRESS,
                        help="Do not use any existing configuration.")

    subparsers = parser.add_subparsers(dest="command", metavar="command")
    for scenario in SCENARIOS.values():
        subparsers.add_parser(scenario.name, parents=[common],
                              help=scenario.description, description=scenario.description)
    subparsers.add_parser("show-config", parents=[common],
                          help="Show the configuration saved by prior runs.")

    return parser


def run_scenario(scenario: Scenario, use_config: bool, config_store: ConfigStore,
                 invoker: ForgeRunner) -> List[CommandOutput]:
    """Gather parameters and run every deployment step of a scenario"""
    print_section(f"Running {scenario.name}")
    load_dotenv(pathlib.Path.cwd() / ".env")

    config = config_store.load(use_config)
    plan = build_plan(scenario, Plan(), config_store, invoker)
    failures = PlanRunner().run(plan, config)
    config_store.save(config)

    print_section("Deployment Summary")
    if failures:
        for output in failures:
            print_warning(f"{output.label}: {output.error}")
        print_warning(f"{len(failures)} of {len(scenario.actions)} forge scripts failed")
        print_info(f"Configuration saved to {config_store.path}; fix the failure and run {scenario.name} again")
    else:
        print_success(f"{scenario.name} completed")
    return failures


def show_config(config_store: ConfigStore):
    print_section(f"Configuration in {config_store.path}")
    config = config_store.read()
    if not config:
        print_warning("No configuration saved by prior runs")
        return
    for key, value in config.items():
        print_info(f"{key}: {format_value(key, value)}")


def main(argv: Optional[List[str]] = None):
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config_store = ConfigStore()
        if args.command == "show-config":
            show_config(config_store)
            return

        run_scenario(SCENARIOS[args.command], args.use_config, config_store, ForgeRunner(log_dir=LOG_DIR))

    except KeyboardInterrupt:
        print_info("Aborted by user.")
        sys.exit(1)
    except Exception as e:
        print_error(f"Deployment failed: {str(e)}")
        print_error("Full traceback:")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
