from __future__ import annotations

import unittest

from _support import FakeGitRemote

from sittervendor.core.models import GrammarDescriptor
from sittervendor.registry import Registry
from sittervendor.vcs.git_remote import GitRemote
from sittervendor.versions.freshness import FreshnessChecker, latest_release


class LatestReleaseTests(unittest.TestCase):
    def test_semantic_order_not_lexical(self) -> None:
        self.assertEqual(latest_release(["v0.9.0", "v0.16.0", "v0.10.2"]), "v0.16.0")

    def test_prefix_filters_tags(self) -> None:
        self.assertEqual(latest_release(["0.20.0", "v0.16.0", "release-1"]), "v0.16.0")

    def test_invalid_tags_skipped(self) -> None:
        self.assertEqual(latest_release(["vnext", "v0.1.0", "v0.2.0-broken-tag"]), "v0.1.0")

    def test_none_when_nothing_qualifies(self) -> None:
        self.assertIsNone(latest_release([]))
        self.assertIsNone(latest_release(["latest", "0.19.0"]))

    def test_empty_prefix_accepts_bare_versions(self) -> None:
        self.assertEqual(latest_release(["0.16.1", "0.19.3", "v0.20.0-x"], prefix=""), "0.19.3")


class FreshnessCheckerTests(unittest.TestCase):
    registry = Registry(
        (
            GrammarDescriptor("go", "v0.16.0", ("parser.c",)),
            GrammarDescriptor("rust", "v0.16.0", ("parser.c", "scanner.c")),
            GrammarDescriptor("python", "v0.16.0", ("parser.c", "scanner.cc")),
        ),
        engine_version="0.16.1",
    )

    def check(self, git: FakeGitRemote):
        return FreshnessChecker(registry=self.registry, git=git).check()

    def test_engine_first_then_registry_order(self) -> None:
        entries = self.check(FakeGitRemote())
        self.assertEqual([e.name for e in entries], ["tree-sitter", "go", "rust", "python"])

    def test_outdated_flags(self) -> None:
        git = FakeGitRemote({
            "tree-sitter": ["0.16.1", "0.15.0"],
            "tree-sitter-go": ["v0.16.0", "v0.15.0"],
            "tree-sitter-rust": ["v0.16.0", "v0.19.1"],
            "tree-sitter-python": ["v0.16.0", "v0.17.0-rc1"],
        })
        by_name = {e.name: e for e in self.check(git)}

        self.assertFalse(by_name["tree-sitter"].outdated)
        self.assertFalse(by_name["go"].outdated)
        self.assertEqual(by_name["go"].remote_latest, "v0.16.0")

        self.assertTrue(by_name["rust"].outdated)
        self.assertEqual(by_name["rust"].remote_latest, "v0.19.1")

        # A pre-release above the pin still counts as a different latest.
        self.assertTrue(by_name["python"].outdated)
        self.assertEqual(by_name["python"].remote_latest, "v0.17.0-rc1")

    def test_vendored_ahead_of_remote_is_outdated(self) -> None:
        registry = Registry((GrammarDescriptor("python", "v0.17.0-rc1", ("parser.c", "scanner.cc")),))
        git = FakeGitRemote({"tree-sitter-python": ["v0.16.0"]})
        entry = FreshnessChecker(registry=registry, git=git).check()[1]
        self.assertEqual(entry.name, "python")
        self.assertEqual(entry.remote_latest, "v0.16.0")
        self.assertTrue(entry.outdated)

    def test_no_matching_tags_is_outdated(self) -> None:
        by_name = {e.name: e for e in self.check(FakeGitRemote({"tree-sitter-go": ["latest"]}))}
        self.assertIsNone(by_name["go"].remote_latest)
        self.assertTrue(by_name["go"].outdated)

    def test_query_failure_is_isolated(self) -> None:
        git = FakeGitRemote(
            {"tree-sitter-go": ["v0.16.0"], "tree-sitter-python": ["v0.19.0"]},
            failing_repos=("tree-sitter-rust",),
        )
        with self.assertLogs("sittervendor", level="WARNING"):
            entries = self.check(git)
        by_name = {e.name: e for e in entries}
        self.assertEqual(len(entries), 4)
        self.assertIsNotNone(by_name["rust"].error)
        self.assertFalse(by_name["rust"].outdated)
        self.assertIsNone(by_name["go"].error)
        self.assertTrue(by_name["python"].outdated)


class LsRemoteParsingTests(unittest.TestCase):
    def test_parse_ls_remote(self) -> None:
        out = (
            "1111111111111111111111111111111111111111\trefs/tags/v0.15.0\n"
            "2222222222222222222222222222222222222222\trefs/tags/v0.16.0\n"
            "3333333333333333333333333333333333333333\trefs/heads/master\n"
            "garbage line\n"
        )
        self.assertEqual(GitRemote.parse_ls_remote(out), ["v0.15.0", "v0.16.0"])

    def test_repo_url(self) -> None:
        remote = GitRemote(host="https://github.com/", owner="tree-sitter")
        self.assertEqual(remote.repo_url("tree-sitter-go"), "https://github.com/tree-sitter/tree-sitter-go.git")


if __name__ == "__main__":
    unittest.main(verbosity=2)
