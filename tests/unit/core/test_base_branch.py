"""Tests for base branch resolution."""

from pathlib import Path

import pytest

from pull_draftsman.core.base_branch import is_symbolic_remote_ref, resolve_base_branch
from pull_draftsman.core.config import DEFAULT_BASE_BRANCH_CANDIDATES
from pull_draftsman.core.errors import ResolutionError
from pull_draftsman.gateway.git.fake import FakeGit

REPO = Path("/repo")
HEAD = "head000"


def _resolve(
    git: FakeGit,
    remote_branches: list[str],
    *,
    explicit_base: str | None = None,
    current_branch: str | None = "feature/add-new-user",
    candidates: tuple[str, ...] = DEFAULT_BASE_BRANCH_CANDIDATES,
    remote_name: str = "origin",
) -> str:
    return resolve_base_branch(
        git,
        REPO,
        head_commit=HEAD,
        current_branch=current_branch,
        remote_name=remote_name,
        remote_branches=remote_branches,
        candidates=candidates,
        explicit_base=explicit_base,
    )


def _linear_history_git() -> FakeGit:
    """main -> stage -> feature (HEAD): 2 commits past stage, 5 past main."""
    return FakeGit(
        merge_bases={
            (HEAD, "origin/stage"): "stage111",
            (HEAD, "origin/main"): "main222",
        },
        commit_counts={
            ("stage111", HEAD): 2,
            ("main222", HEAD): 5,
        },
    )


class TestExplicitBase:
    def test_returns_explicit_base_when_present_on_remote(self) -> None:
        git = FakeGit()

        result = _resolve(git, ["origin/main", "origin/unrelated"], explicit_base="unrelated")

        assert result == "unrelated"

    def test_explicit_base_skips_ancestry_checks(self) -> None:
        # No merge bases configured: an ancestry check would find nothing
        git = FakeGit()

        result = _resolve(git, ["origin/orphan"], explicit_base="orphan")

        assert result == "orphan"

    def test_raises_when_explicit_base_missing(self) -> None:
        git = _linear_history_git()

        with pytest.raises(ResolutionError) as exc_info:
            _resolve(git, ["origin/main", "origin/stage"], explicit_base="develop")

        assert 'Base branch "develop" was not found on remote "origin"' in exc_info.value.message
        assert exc_info.value.available == ("origin/main", "origin/stage")

    def test_explicit_base_must_be_on_selected_remote(self) -> None:
        git = FakeGit()

        with pytest.raises(ResolutionError):
            _resolve(git, ["upstream/develop"], explicit_base="develop")


class TestDistanceScoring:
    def test_linear_history_prefers_closest_parent(self) -> None:
        git = _linear_history_git()

        result = _resolve(git, ["origin/main", "origin/stage", "origin/feature/add-new-user"])

        assert result == "stage"

    def test_ignores_remote_branch_of_current_branch(self) -> None:
        # The current branch's own upstream would be 0 commits behind
        git = FakeGit(
            merge_bases={
                (HEAD, "origin/main"): "main222",
                (HEAD, "origin/feature-x"): HEAD,
            },
            commit_counts={("main222", HEAD): 3, (HEAD, HEAD): 0},
        )

        result = _resolve(
            git,
            ["origin/feature-x", "origin/other", "origin/main"],
            current_branch="feature-x",
            candidates=("nothing-conventional",),
        )

        assert result == "main"

    def test_ties_go_to_higher_priority_name(self) -> None:
        git = FakeGit(
            merge_bases={
                (HEAD, "origin/main"): "base333",
                (HEAD, "origin/develop"): "base333",
            },
            commit_counts={("base333", HEAD): 4},
        )

        # Listed alphabetically, as git does; main has the higher priority here
        result = _resolve(git, ["origin/develop", "origin/main"], candidates=("main", "develop"))

        assert result == "main"

    def test_conventional_names_restrict_the_pool(self) -> None:
        # feature-y is closer, but conventional names win when present
        git = FakeGit(
            merge_bases={
                (HEAD, "origin/main"): "main222",
                (HEAD, "origin/feature-y"): "fy444",
            },
            commit_counts={("main222", HEAD): 9, ("fy444", HEAD): 1},
        )

        result = _resolve(git, ["origin/feature-y", "origin/main"])

        assert result == "main"

    def test_uses_all_branches_when_no_conventional_name_exists(self) -> None:
        git = FakeGit(
            merge_bases={
                (HEAD, "origin/epic-a"): "a111",
                (HEAD, "origin/epic-b"): "b222",
            },
            commit_counts={("a111", HEAD): 7, ("b222", HEAD): 3},
        )

        result = _resolve(git, ["origin/epic-a", "origin/epic-b"])

        assert result == "epic-b"

    def test_custom_priority_list(self) -> None:
        git = FakeGit(
            merge_bases={
                (HEAD, "origin/trunk"): "t111",
                (HEAD, "origin/main"): "m222",
            },
            commit_counts={("t111", HEAD): 6, ("m222", HEAD): 2},
        )

        result = _resolve(git, ["origin/main", "origin/trunk"], candidates=("trunk",))

        assert result == "trunk"

    def test_skips_candidate_without_count(self) -> None:
        git = FakeGit(
            merge_bases={
                (HEAD, "origin/stage"): "stage111",
                (HEAD, "origin/main"): "main222",
            },
            commit_counts={("main222", HEAD): 5},
        )

        result = _resolve(git, ["origin/main", "origin/stage"])

        assert result == "main"

    def test_zero_ahead_is_a_valid_score(self) -> None:
        git = FakeGit(
            merge_bases={
                (HEAD, "origin/stage"): HEAD,
                (HEAD, "origin/main"): "main222",
            },
            commit_counts={(HEAD, HEAD): 0, ("main222", HEAD): 5},
        )

        result = _resolve(git, ["origin/main", "origin/stage"])

        assert result == "stage"

    def test_only_considers_selected_remote(self) -> None:
        git = FakeGit(
            merge_bases={
                (HEAD, "upstream/stage"): "s111",
                (HEAD, "origin/main"): "m222",
            },
            commit_counts={("s111", HEAD): 1, ("m222", HEAD): 5},
        )

        result = _resolve(git, ["upstream/stage", "origin/main"])

        assert result == "main"


class TestFallback:
    def test_falls_back_to_priority_order_when_no_merge_base(self) -> None:
        git = FakeGit()  # every merge-base lookup fails

        result = _resolve(git, ["origin/main", "origin/master", "origin/develop"])

        assert result == "develop"

    def test_raises_with_tried_names_when_nothing_matches(self) -> None:
        git = FakeGit()

        with pytest.raises(ResolutionError) as exc_info:
            _resolve(git, ["origin/epic-a", "origin/epic-b"])

        error = exc_info.value
        assert error.tried == DEFAULT_BASE_BRANCH_CANDIDATES
        assert "Tried: stage, staging, develop, dev, main, master, release." in error.message
        assert '"--base <branch>"' in error.message

    def test_raises_when_no_remote_branches(self) -> None:
        git = FakeGit()

        with pytest.raises(ResolutionError) as exc_info:
            _resolve(git, [])

        assert 'No remote branches found on "origin"' in exc_info.value.message

    def test_raises_when_only_own_upstream_exists(self) -> None:
        git = FakeGit()

        with pytest.raises(ResolutionError) as exc_info:
            _resolve(git, ["origin/feature-x"], current_branch="feature-x")

        assert "No remote branches found" in exc_info.value.message

    def test_message_omits_tried_names_without_candidates(self) -> None:
        git = FakeGit()

        with pytest.raises(ResolutionError) as exc_info:
            _resolve(git, ["origin/epic-a"], candidates=())

        error = exc_info.value
        assert error.tried == ()
        assert "Tried:" not in error.message
        assert error.message.endswith('"--base <branch>" option.')


class TestSymbolicRefs:
    @pytest.mark.parametrize(
        "name",
        ["origin/HEAD -> origin/main", "origin/HEAD", "origin"],
    )
    def test_symbolic_entries_are_detected(self, name: str) -> None:
        assert is_symbolic_remote_ref(name) is True

    def test_regular_branch_is_not_symbolic(self) -> None:
        assert is_symbolic_remote_ref("origin/feature/HEADER") is False

    def test_symbolic_head_is_never_a_candidate(self) -> None:
        git = FakeGit(
            merge_bases={(HEAD, "origin/main"): "main222"},
            commit_counts={("main222", HEAD): 2},
        )

        result = _resolve(git, ["origin/HEAD -> origin/main", "origin/main"])

        assert result == "main"

    def test_only_symbolic_entries_counts_as_no_branches(self) -> None:
        git = FakeGit()

        with pytest.raises(ResolutionError) as exc_info:
            _resolve(git, ["origin", "origin/HEAD"])

        assert "No remote branches found" in exc_info.value.message
