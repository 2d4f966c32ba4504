from __future__ import annotations

import json
import logging
import shlex
import subprocess
from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass
from typing import Any, Sequence

from .default_order import DEFAULT_SORT_ORDER
from .sorter import sort_tokens, split_tokens
from .types import SortOptions

logger = logging.getLogger(__name__)


class OrderingError(RuntimeError):
    pass


class BaseOrderProvider(ABC):
    @abstractmethod
    def sort(self, raw: str, options: SortOptions) -> str:
        raise NotImplementedError


@dataclass
class StaticOrderProvider(BaseOrderProvider):
    order: Sequence[str] = DEFAULT_SORT_ORDER

    def sort(self, raw: str, options: SortOptions) -> str:
        return sort_tokens(raw, self.order, options)


@dataclass
class CommandOrderProvider(BaseOrderProvider):
    """Delegates ordering to a local command speaking JSON on stdin/stdout.

    The command receives ``{"classes": "...", "keep_duplicates": bool}`` and
    must answer with ``{"classes": "..."}`` holding the same tokens in the
    desired order. Any failure falls back to the unsorted tokens.
    """

    command: str
    timeout_seconds: int = 30

    def sort(self, raw: str, options: SortOptions) -> str:
        if not raw:
            return ""

        split = split_tokens(raw, options)
        if not split.tokens:
            return split.join([])

        try:
            ordered = self.order(split.tokens, keep_duplicates=not options.remove_duplicates)
        except OrderingError as exc:
            logger.warning("order command failed, keeping original order: %s", exc)
            ordered = split.tokens

        return split.join(ordered)

    def order(self, tokens: list[str], keep_duplicates: bool) -> list[str]:
        args = shlex.split(self.command)
        payload = json.dumps(
            {"classes": " ".join(tokens), "keep_duplicates": keep_duplicates},
            ensure_ascii=False,
        )

        try:
            proc = subprocess.run(
                args,
                input=payload,
                text=True,
                capture_output=True,
                timeout=self.timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise OrderingError(f"Order command timed out after {self.timeout_seconds}s.") from exc
        except OSError as exc:
            raise OrderingError(f"Order command could not be started: {exc}") from exc

        if proc.returncode != 0:
            raise OrderingError(
                "Order command failed "
                f"(exit={proc.returncode}): {proc.stderr.strip() or 'no stderr'}"
            )

        try:
            output = json.loads(proc.stdout)
        except json.JSONDecodeError as exc:
            raise OrderingError(
                "Order command must return JSON. "
                f"Got: {proc.stdout[:200]!r}"
            ) from exc

        ordered = _parse_classes(output).split()
        if Counter(ordered) != Counter(tokens):
            raise OrderingError("Order command returned a different set of classes.")
        return ordered


def available_providers() -> list[str]:
    return ["static", "command"]


def build_provider(
    provider: str = "static",
    order: Sequence[str] | None = None,
    order_cmd: str | None = None,
) -> BaseOrderProvider:
    provider_name = provider.strip().lower()
    if provider_name == "static":
        return StaticOrderProvider(order=tuple(order) if order is not None else DEFAULT_SORT_ORDER)
    if provider_name == "command":
        if not order_cmd:
            raise OrderingError("--order-cmd is required when provider is 'command'.")
        return CommandOrderProvider(command=order_cmd)
    raise OrderingError(f"Unsupported order provider: {provider}")


def validate_command_provider(order_cmd: str) -> list[str]:
    provider = CommandOrderProvider(command=order_cmd)
    return provider.order(["p-4", "flex", "container"], keep_duplicates=False)


def _parse_classes(output: Any) -> str:
    if isinstance(output, str):
        return output
    if isinstance(output, dict) and isinstance(output.get("classes"), str):
        return output["classes"]
    raise OrderingError("Order command output must be a JSON string or an object with 'classes'.")
