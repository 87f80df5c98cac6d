#!/usr/bin/env python3
"""
World ID State Bridge Deployment Tool - Deployment Runner

Runs a single forge script against the chain it targets and reports the
outcome. Forge failures are reported and returned, never raised: the
deployment plan carries on with the next step.

If you want to modify the command arguments look at ForgeRunner.build_command.
The flags for each script (fork URL, explorer key, --legacy, --verify) are
declared in scenarios.py.
"""

import subprocess
import pathlib
import time
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional
from .formatter import *
from .formatter import Formatter


@dataclass(frozen=True)
class ScriptAction:
    label: str
    script: str
    contract: str
    rpc_key: str
    explorer_key: Optional[str] = None
    verify: bool = False
    legacy: bool = False

    @property
    def target(self) -> str:
        return f"{self.script}:{self.contract}"

    @property
    def script_name(self) -> str:
        return pathlib.PurePosixPath(self.script).name


@dataclass
class CommandOutput:
    label: str
    command: List[str]
    returncode: Optional[int]
    stdout: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0 and self.error is None


class ForgeRunner:
    def __init__(self, log_dir=None):
        self.log_dir = pathlib.Path(log_dir) if log_dir else None

    def build_command(self, action: ScriptAction, config: Mapping[str, Any]) -> List[str]:
        """Build the forge script command for an action"""
        cmd = [
            "forge", "script", action.target,
            "--fork-url", self._config_value(action.rpc_key, config),
        ]
        if action.explorer_key:
            cmd.extend(["--etherscan-api-key", self._config_value(action.explorer_key, config)])
        if action.legacy:
            cmd.append("--legacy")
        cmd.append("--broadcast")
        if action.verify:
            cmd.append("--verify")
        cmd.append("-vvvv")
        return cmd

    def invoke(self, action: ScriptAction, config: Mapping[str, Any]) -> CommandOutput:
        """Run a forge script, print its output and report the outcome"""
        print_subsection(action.label)
        cmd = self.build_command(action, config)
        print_command(cmd, config)

        try:
            result = subprocess.run(cmd, stdout=subprocess.PIPE, text=True, check=True)
            output = CommandOutput(action.label, cmd, result.returncode, result.stdout or "")
        except subprocess.CalledProcessError as e:
            output = CommandOutput(
                action.label, cmd, e.returncode, e.stdout or "",
                error=Formatter.mask_secrets(f"Command failed with exit code: {e.returncode}", config),
            )
        except OSError as e:
            output = CommandOutput(
                action.label, cmd, None,
                error=Formatter.mask_secrets(f"Could not run forge: {e}", config),
            )

        if output.stdout:
            print("==== FORGE LOGS ====\n")
            print(output.stdout)
            print("\n==== END OF LOGS ====\n")

        if self.log_dir:
            self._write_log(action, output, config)

        if output.ok:
            print_success(f"{action.script_name} ran successfully!")
        else:
            print_error(f"{action.script_name} failed: {output.error}")
        return output

    def _config_value(self, key: str, config: Mapping[str, Any]) -> str:
        value = config.get(key)
        if value is None or value == "":
            print_warning(f"{key} is not set")
            return ""
        return str(value)

    def _write_log(self, action: ScriptAction, output: CommandOutput, config: Mapping[str, Any]):
        self.log_dir.mkdir(parents=True, exist_ok=True)
        log_file = self.log_dir / f"forge-{action.contract}.log"

        with open(log_file, "w") as f:
            f.write(f"Command: {format_command(output.command, config)}\n")
            f.write(f"Exit code: {output.returncode}\n")
            f.write(f"Timestamp: {time.strftime('%Y-%m-%d %H:%M:%S')}\n")
            f.write("\n" + "="*50 + "\n")
            if output.stdout:
                f.write("=== FORGE STDOUT ===\n")
                f.write(Formatter.mask_secrets(output.stdout, config))
                f.write("\n")
            if output.error:
                f.write("=== ERROR ===\n")
                f.write(output.error)
                f.write("\n")

        print_info(f"Forge output written to: {log_file}")
