from __future__ import annotations

import pytest

from rsc_scanner.classifier import classify
from rsc_scanner.parsers.package_json import Manifest
from rsc_scanner.parsers.semver import major_version


class TestMajorVersion:
    @pytest.mark.parametrize(
        ("expr", "expected"),
        [
            ("19.2.1", 19),
            ("^19.0.0", 19),
            ("~18.3.1", 18),
            (">=19", 19),
            ("v20.1.0", 20),
            ("19.0.0-rc.1", 19),
            ("19.x", 19),
            ("18.3.0 || 19.0.0", 18),
            ("  ^17.0.2 ", 17),
        ],
    )
    def test_parses_leading_major(self, expr: str, expected: int) -> None:
        assert major_version(expr) == expected

    @pytest.mark.parametrize("expr", ["", "latest", "*", "x.y.z", "x.19", "^"])
    def test_unparsable_is_none(self, expr: str) -> None:
        assert major_version(expr) is None


class TestClassify:
    def test_next_any_version(self) -> None:
        indicator = classify(Manifest(dependencies={"next": "14.2.1"}))
        assert indicator is not None
        assert indicator.package == "next"
        assert "14.2.1" in indicator.reason

    def test_next_in_dev_dependencies(self) -> None:
        indicator = classify(Manifest(dev_dependencies={"next": "canary"}))
        assert indicator is not None
        assert "canary" in indicator.reason

    def test_server_bridge(self) -> None:
        indicator = classify(Manifest(dependencies={"react-server-dom-webpack": "^19.0.0"}))
        assert indicator is not None
        assert indicator.package == "react-server-dom-webpack"
        assert "^19.0.0" in indicator.reason

    @pytest.mark.parametrize("version", ["19.2.1", "^19.0.0", ">=19.1"])
    def test_react_19_or_newer(self, version: str) -> None:
        indicator = classify(Manifest(dependencies={"react": version}))
        assert indicator is not None
        assert indicator.package == "react"
        assert version in indicator.reason

    @pytest.mark.parametrize("version", ["18.3.1", "^18.2.0", "latest", "workspace:*"])
    def test_react_below_19_or_unparsable(self, version: str) -> None:
        assert classify(Manifest(dependencies={"react": version})) is None

    def test_priority_next_before_react(self) -> None:
        indicator = classify(
            Manifest(
                dependencies={"react": "19.0.0", "react-server-dom-webpack": "19.0.0"},
                dev_dependencies={"next": "15.0.0"},
            )
        )
        assert indicator is not None
        assert indicator.package == "next"

    def test_priority_bridge_before_react(self) -> None:
        indicator = classify(
            Manifest(dependencies={"react": "19.0.0", "react-server-dom-webpack": "19.0.0"})
        )
        assert indicator is not None
        assert indicator.package == "react-server-dom-webpack"

    def test_no_indicator(self) -> None:
        assert classify(Manifest(dependencies={"lodash": "4.17.21"})) is None
        assert classify(Manifest()) is None
