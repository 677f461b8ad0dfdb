"""
Browser Capability Dataset

Read-only queries over static browser data in the caniuse.com layout:
    - agents: browsers, their vendor prefix, versions and usage share
    - data: capabilities with per-browser, per-version support strings

Support strings are space separated flags: "y" (supported), "a"
(partial), "n" (not supported) and "x" (needs the vendor prefix).

The dataset is loaded once, lazily, through get_dataset() and is never
mutated afterwards. Unknown names raise DatasetError.
"""
from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import yaml

from .config import DatasetConfig
from .errors import DatasetError

logger = logging.getLogger(__name__)

# The agent keys used by caniuse are not the names people use.
PUBLIC_BROWSER_NAMES: Mapping[str, str] = MappingProxyType({
    "and_chr": "android-chrome",
    "and_ff": "android-firefox",
    "bb": "blackberry",
    "ie_mob": "ie-mobile",
    "ios_saf": "ios-safari",
    "op_mini": "opera-mini",
    "op_mob": "opera-mobile",
})

_SUPPORTED_RE = re.compile(r"\by\b")
_PREFIXED_RE = re.compile(r"\bx\b")


def _public_name(agent_key: str) -> str:
    return PUBLIC_BROWSER_NAMES.get(agent_key, agent_key)


def _dashed(prefix: str) -> str:
    return prefix if prefix.startswith("-") else f"-{prefix}"


@dataclass(frozen=True)
class Agent:
    """One browser. Versions run oldest to newest."""

    name: str
    title: str
    prefix: str
    versions: Tuple[str, ...]
    usage: Mapping[str, float]
    prefix_exceptions: Mapping[str, str]


@dataclass(frozen=True)
class Capability:
    """One capability. stats maps public browser name -> version -> support."""

    name: str
    title: str
    categories: Tuple[str, ...]
    stats: Mapping[str, Mapping[str, str]]

    @property
    def is_css(self) -> bool:
        return any("CSS" in category for category in self.categories)


def _agent_from_dict(key: str, d: Dict[str, Any]) -> Agent:
    if not d.get("prefix"):
        raise DatasetError(f"Browser data for {key} has no prefix")
    versions = tuple(str(v) for v in d.get("versions") or [] if v is not None)
    usage = {str(k): float(v or 0) for k, v in (d.get("usage_global") or {}).items()}
    exceptions = {str(k): str(v) for k, v in (d.get("prefix_exceptions") or {}).items()}
    return Agent(
        name=_public_name(key),
        title=d.get("browser", key),
        prefix=str(d["prefix"]),
        versions=versions,
        usage=MappingProxyType(usage),
        prefix_exceptions=MappingProxyType(exceptions),
    )


def _capability_from_dict(name: str, d: Dict[str, Any]) -> Capability:
    stats = {
        _public_name(key): MappingProxyType({str(v): str(s) for v, s in (by_version or {}).items()})
        for key, by_version in (d.get("stats") or {}).items()
    }
    return Capability(
        name=name,
        title=d.get("title", name),
        categories=tuple(d.get("categories") or []),
        stats=MappingProxyType(stats),
    )


class CanIUse:
    """
    Queries over the browser capability data.

    Browser names are public names ("ios-safari", not "ios_saf").
    Prefixes are returned with their leading hyphen ("-webkit").
    """

    def __init__(self, data: Dict[str, Any]):
        if not isinstance(data, dict) or "agents" not in data or "data" not in data:
            raise DatasetError("Browser data must contain 'agents' and 'data'")

        agents = [_agent_from_dict(k, v) for k, v in data["agents"].items()]
        self._agents: Mapping[str, Agent] = MappingProxyType(
            {a.name: a for a in sorted(agents, key=lambda a: a.name)}
        )
        features = {k: _capability_from_dict(k, v) for k, v in data["data"].items()}
        self._capabilities: Mapping[str, Capability] = MappingProxyType(
            {name: features[name] for name in sorted(features) if features[name].is_css}
        )

    @classmethod
    def from_yaml(cls, text: str) -> CanIUse:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DatasetError(f"Browser data is not valid YAML: {e}") from e
        return cls(data)

    @classmethod
    def from_file(cls, path: str) -> CanIUse:
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise DatasetError(f"Cannot read browser data from {path}: {e}") from e
        dataset = cls.from_yaml(text)
        logger.info(
            "Loaded browser data from %s: %d browsers, %d capabilities",
            path, len(dataset.browsers()), len(dataset.capabilities()),
        )
        return dataset

    # =========================================================================
    # Validation
    # =========================================================================

    def assert_valid_browser(self, browser: str) -> None:
        if browser not in self._agents:
            raise DatasetError(f"{browser} is not a known browser.")

    def assert_valid_capability(self, capability: str) -> None:
        if capability not in self._capabilities:
            raise DatasetError(f"{capability} is not a known browser capability.")

    def assert_valid_version(self, browser: str, *versions: str) -> None:
        known = self.versions(browser)
        for version in versions:
            if version not in known:
                raise DatasetError(f"{version} is not a version for {browser}")

    def _agent(self, browser: str) -> Agent:
        self.assert_valid_browser(browser)
        return self._agents[browser]

    def _caniuse_version(self, browser: str, version: Optional[str]) -> Optional[str]:
        """Map a version onto the dataset's name for it ("4.0" -> "4.0-4.1")."""
        if version is None:
            return None
        versions = self._agent(browser).versions
        if version in versions:
            return version
        for v in versions:
            if "-" in v and version in v.split("-"):
                return v
        return version

    def _support(self, browser: str, version: str, capability: str) -> str:
        return self._capabilities[capability].stats.get(browser, {}).get(version, "n")

    # =========================================================================
    # Queries
    # =========================================================================

    def browsers(self) -> List[str]:
        return list(self._agents)

    def browsers_with_prefix(self, prefix: str) -> List[str]:
        """Browsers that use the prefix ("moz" or "-moz") in any version."""
        prefix = _dashed(prefix)
        return [b for b in self._agents if prefix in self.all_prefixes(b)]

    def capabilities(self) -> List[str]:
        return list(self._capabilities)

    def versions(self, browser: str, min_usage: float = 0) -> List[str]:
        """
        Versions of a browser, oldest first.

        With min_usage, only versions whose usage share exceeds it.
        """
        agent = self._agent(browser)
        if min_usage == 0:
            return list(agent.versions)
        return [v for v in agent.versions if agent.usage.get(v, 0.0) > min_usage]

    def usage(self, browser: str, version: str) -> float:
        version = self._caniuse_version(browser, version)
        self.assert_valid_version(browser, version)
        return self._agents[browser].usage.get(version, 0.0)

    def prefix(self, browser: str, version: Optional[str] = None) -> str:
        """The prefix a browser uses, at a given version if one is named."""
        agent = self._agent(browser)
        version = self._caniuse_version(browser, version)
        if version is None:
            return _dashed(agent.prefix)
        self.assert_valid_version(browser, version)
        return _dashed(agent.prefix_exceptions.get(version, agent.prefix))

    def all_prefixes(self, browser: str) -> List[str]:
        agent = self._agent(browser)
        found = {_dashed(agent.prefix)}
        found.update(_dashed(p) for p in agent.prefix_exceptions.values())
        return sorted(found)

    def prefixes(self, browsers: Optional[Iterable[str]] = None) -> List[str]:
        """Every prefix used by the given browsers (all browsers by default)."""
        if browsers is None:
            browsers = self.browsers()
        found = set()
        for browser in browsers:
            found.update(self.all_prefixes(browser))
        return sorted(found)

    def requires_prefix(self, browser: str, min_version: str, capability: str) -> Optional[str]:
        """
        The prefix a browser needs for a capability at min_version or later.

        Returns:
            The first prefix required from min_version onwards, or None
        """
        self.assert_valid_browser(browser)
        self.assert_valid_capability(capability)
        min_version = self._caniuse_version(browser, min_version)
        self.assert_valid_version(browser, min_version)

        versions = self.versions(browser)
        for version in versions[versions.index(min_version):]:
            if _PREFIXED_RE.search(self._support(browser, version, capability)):
                return self.prefix(browser, version)
        return None

    def omitted_usage(self, browser: str, min_version: str) -> float:
        """Usage share (0-100) of the versions older than min_version."""
        min_version = self._caniuse_version(browser, min_version)
        self.assert_valid_version(browser, min_version)
        agent = self._agents[browser]
        total = 0.0
        for version in agent.versions:
            if version == min_version:
                break
            total += agent.usage.get(version, 0.0)
        return total

    def prefixed_usage(self, prefix: str, capability: str) -> float:
        """Usage share (0-100) of browser versions needing this prefix for the capability."""
        self.assert_valid_capability(capability)
        prefix = _dashed(prefix)
        total = 0.0
        for browser in self.browsers_with_prefix(prefix):
            agent = self._agents[browser]
            for version in agent.versions:
                support = self._support(browser, version, capability)
                if _PREFIXED_RE.search(support) and self.prefix(browser, version) == prefix:
                    total += agent.usage.get(version, 0.0)
        return total

    def compare_versions(self, browser: str, version1: str, version2: str) -> int:
        """Compare two versions by position: negative, zero or positive."""
        versions = self.versions(browser)
        if version1 not in versions:
            raise DatasetError(f"{version1} is not a version for {browser}")
        if version2 not in versions:
            raise DatasetError(f"{version2} is not a version for {browser}")
        index1, index2 = versions.index(version1), versions.index(version2)
        return (index1 > index2) - (index1 < index2)

    def browser_minimums(self, capability: str, prefix: Optional[str] = None) -> Dict[str, str]:
        """
        The first version of each browser supporting a capability.

        Without a prefix, the first version supporting it unprefixed.
        With a prefix, only browsers using that prefix, and support with
        that prefix counts too. Browsers lacking the capability are left out.
        """
        self.assert_valid_capability(capability)
        if prefix is not None:
            prefix = _dashed(prefix)
        minimums: Dict[str, str] = {}
        for browser, agent in self._agents.items():
            if prefix is not None and prefix not in self.all_prefixes(browser):
                continue
            for version in agent.versions:
                support = self._support(browser, version, capability)
                if not _SUPPORTED_RE.search(support):
                    continue
                if not _PREFIXED_RE.search(support) or (
                    prefix is not None and self.prefix(browser, version) == prefix
                ):
                    minimums[browser] = version
                    break
        return minimums


# =============================================================================
# Process-wide instance
# =============================================================================

_instance: Optional[CanIUse] = None
_lock = threading.Lock()


def get_dataset(config: Optional[DatasetConfig] = None) -> CanIUse:
    """
    Return the shared dataset, loading it on first use.

    The first caller's config decides where the data comes from.
    """
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                config = config or DatasetConfig.from_env()
                _instance = CanIUse.from_file(config.data_path)
    return _instance


def reset_dataset() -> None:
    """Forget the shared dataset so the next get_dataset() reloads it."""
    global _instance
    with _lock:
        _instance = None
