"""Tests for definition file glob matching."""

from pathlib import Path
from pathlib import PureWindowsPath

import pytest

from dependency_analyzer.errors import ConfigurationError
from dependency_analyzer.matching import DefinitionFileMatcher
from dependency_analyzer.matching import glob_to_regex


class TestDefinitionFileMatcher:
    """Tests for DefinitionFileMatcher."""

    @pytest.mark.parametrize(
        "path",
        [
            "package.json",
            "web/package.json",
            "/a/package.json",
            "/a/b/c/d/package.json",
            Path("/srv/app/package.json"),
        ],
    )
    def test_matches_at_any_depth(self, path):
        """Test that a pattern matches the file name below any directory."""
        assert DefinitionFileMatcher(["package.json"]).matches(path)

    @pytest.mark.parametrize(
        "path",
        [
            "/a/xpackage.json",
            "/a/package.json.bak",
            "/a/package.json/readme.md",
            "/a/package.jsonx",
        ],
    )
    def test_requires_whole_component_suffix(self, path):
        """Test that only complete trailing components match."""
        assert not DefinitionFileMatcher(["package.json"]).matches(path)

    def test_any_pattern_matches(self):
        """Test that a match on any pattern is enough."""
        matcher = DefinitionFileMatcher(["build.gradle", "settings.gradle"])

        assert matcher.matches("/x/build.gradle")
        assert matcher.matches("/x/settings.gradle")
        assert not matcher.matches("/x/pom.xml")

    def test_star_stays_within_component(self):
        """Test that * does not cross directory separators."""
        matcher = DefinitionFileMatcher(["requirements*.txt"])

        assert matcher.matches("/p/requirements.txt")
        assert matcher.matches("/p/requirements-dev.txt")
        assert not matcher.matches("/p/requirements/dev.txt")

    def test_double_star_crosses_components(self):
        """Test that ** crosses directory separators."""
        matcher = DefinitionFileMatcher(["gradle/**/libs.versions.toml"])

        assert matcher.matches("/p/gradle/libs.versions.toml") is False
        assert matcher.matches("/p/gradle/catalogs/libs.versions.toml")
        assert matcher.matches("gradle/a/b/libs.versions.toml")

    def test_pattern_with_directory_component(self):
        """Test that a multi-component pattern matches as a suffix."""
        matcher = DefinitionFileMatcher(["app/build.gradle"])

        assert matcher.matches("/repo/app/build.gradle")
        assert not matcher.matches("/repo/lib/build.gradle")
        assert not matcher.matches("/repo/myapp/build.gradle")

    def test_question_mark_and_classes(self):
        """Test ? and character classes."""
        matcher = DefinitionFileMatcher(["Gemfile?lock", "[Pp]ipfile", "req[!_]txt"])

        assert matcher.matches("/r/Gemfile.lock")
        assert not matcher.matches("/r/Gemfile/lock")
        assert matcher.matches("/r/Pipfile")
        assert matcher.matches("/r/pipfile")
        assert matcher.matches("/r/req.txt")
        assert not matcher.matches("/r/req_txt")

    def test_alternation(self):
        """Test {a,b} alternation."""
        matcher = DefinitionFileMatcher(["build.gradle{,.kts}"])

        assert matcher.matches("/r/build.gradle")
        assert matcher.matches("/r/build.gradle.kts")
        assert not matcher.matches("/r/build.gradle.groovy")

    def test_escaped_characters_are_literal(self):
        """Test that an escaped metacharacter matches itself only."""
        matcher = DefinitionFileMatcher([r"weird\*name.txt"])

        assert matcher.matches("/r/weird*name.txt")
        assert not matcher.matches("/r/weirdXname.txt")

    def test_windows_separators(self):
        """Test that backslash separators in paths are normalized."""
        matcher = DefinitionFileMatcher(["package.json"])

        assert matcher.matches(PureWindowsPath(r"C:\work\web\package.json"))

    def test_globs_property_keeps_order(self):
        """Test that original patterns are exposed in order."""
        matcher = DefinitionFileMatcher(["b", "a"])
        assert matcher.globs == ("b", "a")

    def test_empty_pattern_list_matches_nothing(self):
        """Test that a matcher without patterns never matches."""
        assert not DefinitionFileMatcher([]).matches("/a/package.json")

    def test_two_matchers_can_both_match(self):
        """Test that overlapping matchers both report a match."""
        first = DefinitionFileMatcher(["build.gradle"])
        second = DefinitionFileMatcher(["*.gradle"])

        assert first.matches("/x/build.gradle")
        assert second.matches("/x/build.gradle")


class TestInvalidPatterns:
    """Tests for pattern validation."""

    @pytest.mark.parametrize(
        "pattern",
        [
            "",
            "[abc",
            "[]",
            "[!]",
            "{a,b",
            "{a,{b,c}}",
            "a}",
            "trailing\\",
            "[a/b]",
        ],
    )
    def test_invalid_pattern_raises(self, pattern):
        """Test that syntactically invalid patterns raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            DefinitionFileMatcher(["package.json", pattern])

    def test_translation_of_simple_pattern(self):
        """Test the regex produced for a plain file name."""
        assert glob_to_regex("a.json") == r"a\.json"
