#!/usr/bin/env python3
"""
World ID State Bridge Deployment Tool - Formatter Module

Provides consistent, Homebrew-style formatting for deployment output.
Designed to work well in both terminal and CI environments.
"""

from typing import Mapping, Optional
from .parameters import PARAMETERS

# Define what gets imported with "from .formatter import *"
__all__ = [
    'print_section',
    'print_subsection',
    'print_step',
    'print_info',
    'print_success',
    'print_error',
    'print_warning',
    'print_command',
    'format_command',
    'format_value',
]


class Formatter:
    # Color constants
    RESET = '\033[0m'
    BOLD = '\033[1m'
    GREEN = '\033[92m'
    RED = '\033[91m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'

    @staticmethod
    def print_section(title: str):
        """Print a main section header (blue, bold)"""
        print(f"{Formatter.BOLD}{Formatter.BLUE}==> {title}{Formatter.RESET}")

    @staticmethod
    def print_subsection(title: str):
        """Print a subsection header (cyan, bold)"""
        print(f"{Formatter.BOLD}{Formatter.CYAN} ==> {title}{Formatter.RESET}")

    @staticmethod
    def print_step(message: str):
        """Print a step message (bold)"""
        print(f"{Formatter.BOLD}  → {message}{Formatter.RESET}")

    @staticmethod
    def print_info(message: str):
        """Print an info message (normal)"""
        print(f"    • {message}")

    @staticmethod
    def print_success(message: str):
        """Print a success message (green checkmark)"""
        print(f"    {Formatter.GREEN}✓ {message} {Formatter.RESET}")

    @staticmethod
    def print_error(message: str):
        """Print an error message (red X)"""
        print(f"    {Formatter.RED}✗ {message} {Formatter.RESET}")

    @staticmethod
    def print_warning(message: str):
        """Print a warning message (yellow warning)"""
        import time
        time.sleep(0.2)
        print(f"    {Formatter.YELLOW}⚠ {message} {Formatter.RESET}")

    @staticmethod
    def mask_secrets(text: str, config: Optional[Mapping] = None) -> str:
        """
        Replace every secret configuration value found in text by the name of
        the environment variable it comes from

        Args:
            text: Text that may contain secrets
            config: Deployment configuration holding the secret values

        Returns:
            The text with secrets masked
        """
        if not config:
            return text

        for parameter in PARAMETERS.values():
            value = config.get(parameter.key)
            if not value:
                continue
            # Private key and explorer API keys
            if parameter.secret:
                text = text.replace(str(value), f"${parameter.env_var}")
            # Mask Alchemy API key in RPC URL
            elif parameter.key.endswith("RpcUrl") and "alchemy" in str(value):
                alchemy_key = str(value).rstrip("/").split("/")[-1]
                if alchemy_key:
                    text = text.replace(alchemy_key, "$ALCHEMY_API_KEY")
        return text

    @staticmethod
    def format_command(cmd: list, config: Optional[Mapping] = None) -> str:
        """
        Format a command list for display, masking secrets

        Args:
            cmd: List of command arguments
            config: Optional deployment configuration for secret masking

        Returns:
            Formatted command string with secrets masked
        """
        debug_cmd = " ".join(str(arg) for arg in cmd)
        return Formatter.mask_secrets(debug_cmd, config)

    @staticmethod
    def print_command(cmd: list, config: Optional[Mapping] = None):
        """
        Print a formatted command with secrets masked

        Args:
            cmd: List of command arguments
            config: Optional deployment configuration for secret masking
        """
        Formatter.print_info("Command")
        formatted_cmd = Formatter.format_command(cmd, config)
        print(f"  {formatted_cmd}")

    @staticmethod
    def format_value(key: str, value) -> str:
        """Format a configuration value for display, hiding secrets"""
        parameter = PARAMETERS.get(key)
        if parameter is not None and parameter.secret and value:
            return f"{Formatter.YELLOW}<hidden, ${parameter.env_var}>{Formatter.RESET}"
        masked = Formatter.mask_secrets(str(value), {key: value})
        return f"{Formatter.CYAN}{masked}{Formatter.RESET}"


# Standalone functions for import * compatibility
def print_section(title: str):
    """Print a main section header (blue, bold)"""
    Formatter.print_section(title)

def print_subsection(title: str):
    """Print a subsection header (cyan, bold)"""
    Formatter.print_subsection(title)

def print_step(message: str):
    """Print a step message (bold)"""
    Formatter.print_step(message)

def print_info(message: str):
    """Print an info message (normal)"""
    Formatter.print_info(message)

def print_success(message: str):
    """Print a success message (green checkmark)"""
    Formatter.print_success(message)

def print_error(message: str):
    """Print an error message (red X)"""
    Formatter.print_error(message)

def print_warning(message: str):
    """Print a warning message (yellow warning)"""
    Formatter.print_warning(message)

def print_command(cmd: list, config: Optional[Mapping] = None):
    """Print a formatted command with secrets masked"""
    Formatter.print_command(cmd, config)

def format_command(cmd: list, config: Optional[Mapping] = None) -> str:
    """Format a command list for display, masking secrets"""
    return Formatter.format_command(cmd, config)

def format_value(key: str, value) -> str:
    """Format a configuration value for display, hiding secrets"""
    return Formatter.format_value(key, value)
