#!/usr/bin/env python3
"""
World ID State Bridge Deployment Tool - Deployment Plan

A plan is an ordered list of labeled steps. The runner executes them strictly
in insertion order and never stops on a failed deployment step: it records
the failure and moves on. Exceptions (invalid input, Ctrl+C) are not caught
and end the run.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, MutableMapping
from .formatter import *
from .runner import CommandOutput

Action = Callable[[MutableMapping[str, Any]], Any]


@dataclass(frozen=True)
class Step:
    label: str
    action: Action


class Plan:
    def __init__(self):
        self.steps: List[Step] = []

    def add(self, label: str, action: Action) -> None:
        self.steps.append(Step(label, action))

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)


class PlanRunner:
    def run(self, plan: Plan, config: MutableMapping[str, Any]) -> List[CommandOutput]:
        """
        Run every step of the plan against config

        Returns:
            The outputs of the external actions that failed, in order
        """
        failures = []
        for index, step in enumerate(plan, start=1):
            print_step(f"[{index}/{len(plan)}] {step.label}")
            result = step.action(config)
            if isinstance(result, CommandOutput) and not result.ok:
                failures.append(result)
        return failures
