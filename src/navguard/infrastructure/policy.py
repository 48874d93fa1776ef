"""
PolicyLoader: build guard trees from JSON policy documents.

A policy document declares leaf guards by registry name and combines them
with the same combinators available in code:

    {
        "kind": "conditional",
        "exclude": ["/login", "/public/**"],
        "guard": {
            "kind": "all",
            "order": "parallel",
            "guards": [
                {"kind": "ref", "name": "AuthGuard"},
                {"kind": "ref", "name": "RoleGuard", "config": {"role": "admin"}}
            ]
        }
    }

Documents are validated against policy.schema.json before anything is
built. Every failure is reported as a ConfigurationError.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any

import jsonschema

from navguard.domain.exceptions import ConfigurationError
from navguard.domain.interfaces import GuardInterface
from navguard.domain.models import DEFAULT_SETTINGS, ExecutionOrder, GuardSettings
from navguard.domain.path_matcher import PathMatcher, PathRule
from navguard.guards import (
    All,
    AllowGuard,
    And,
    AnyOf,
    ConditionalGuard,
    OneOf,
    Or,
    RedirectGuard,
    Xor,
)
from navguard.infrastructure.registry import GuardRegistry
from navguard.schemas import validate_policy

logger = logging.getLogger(__name__)


class PolicyLoader:
    """
    Turns policy documents into guard instances.

    Example usage:
        loader = PolicyLoader(settings=GuardSettings(fallback_path="/home"))
        guard = loader.load_file("policy.json")
    """

    def __init__(
        self,
        registry: type[GuardRegistry] = GuardRegistry,
        settings: GuardSettings | None = None,
    ):
        """
        Args:
            registry: Where ``ref`` nodes look up leaf guards
            settings: Settings threaded into every combinator built
        """
        self._registry = registry
        self._settings = settings or DEFAULT_SETTINGS

    def load(self, data: dict[str, Any]) -> GuardInterface:
        """
        Validate and build a policy document.

        Raises:
            ConfigurationError: On schema violations, unknown guard names,
                invalid regexes or rejected constructor arguments
        """
        try:
            validate_policy(data)
        except jsonschema.ValidationError as e:
            location = "/".join(str(p) for p in e.absolute_path) or "<root>"
            raise ConfigurationError(
                f"Invalid policy at {location}: {e.message}", location
            ) from e
        return self._build(data)

    def load_file(self, path: str | Path) -> GuardInterface:
        """Read a JSON policy file and build it."""
        try:
            data = json.loads(Path(path).read_text())
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Policy file {path} is not valid JSON: {e}"
            ) from e
        return self.load(data)

    def _build(self, node: dict[str, Any]) -> GuardInterface:
        kind = node["kind"]
        logger.debug("Building %s node", kind)

        if kind == "allow":
            return AllowGuard()
        if kind == "redirect":
            return RedirectGuard(node["path"])
        if kind == "ref":
            return self._resolve_ref(node["name"], node.get("config", {}))

        order = ExecutionOrder(node.get("order", ExecutionOrder.SEQUENTIAL.value))
        if kind == "and":
            return And(
                self._build(node["left"]),
                self._build(node["right"]),
                execution_order=order,
                settings=self._settings,
            )
        if kind == "or":
            return Or(
                self._build(node["left"]),
                self._build(node["right"]),
                execution_order=order,
                settings=self._settings,
            )
        if kind == "xor":
            return Xor(
                self._build(node["left"]),
                self._build(node["right"]),
                node["path"],
                execution_order=order,
                settings=self._settings,
            )

        if kind == "conditional":
            matcher = PathMatcher.from_rules(
                include=self._rules(node.get("include", [])),
                exclude=self._rules(node.get("exclude", [])),
            )
            return ConditionalGuard(self._build(node["guard"]), matcher=matcher)

        children = [self._build(child) for child in node["guards"]]
        if kind == "all":
            return All(children, execution_order=order, settings=self._settings)
        if kind == "any_of":
            return AnyOf(
                children,
                fallback_redirect=node.get("fallback"),
                execution_order=order,
                settings=self._settings,
            )
        if kind == "one_of":
            return OneOf(
                children,
                fallback_redirect=node.get("fallback"),
                execution_order=order,
                settings=self._settings,
            )
        raise ConfigurationError(f"Unknown policy node kind '{kind}'", "kind")

    def _resolve_ref(self, name: str, config: dict[str, Any]) -> GuardInterface:
        try:
            return self._registry.create(name, **config)
        except KeyError as e:
            raise ConfigurationError(str(e.args[0]), "name") from e
        except TypeError as e:
            raise ConfigurationError(
                f"Cannot create guard '{name}': {e}", "config"
            ) from e

    @staticmethod
    def _rules(entries: list[str | dict[str, str]]) -> list[PathRule]:
        rules: list[PathRule] = []
        for entry in entries:
            if isinstance(entry, str):
                rules.append(entry)
                continue
            try:
                rules.append(re.compile(entry["regex"]))
            except re.error as e:
                raise ConfigurationError(
                    f"Invalid regex {entry['regex']!r}: {e}", "regex"
                ) from e
        return rules
