import pytest

from proma.authz import (
    correct_user_or_pm,
    correct_user_or_shared_board_pm,
    is_pm,
    logged_in,
    on_board,
    on_board_of_project,
    on_project_or_pm_on_board,
    on_session_board,
    on_shared_board,
    session_owner_or_pm_on_board,
)
from proma.authz.actor import Member, ProjectManager, actor_from_claims
from proma.errors import NotFoundError

ALL_PREDICATES = [
    logged_in,
    is_pm,
    correct_user_or_pm,
    on_board,
    on_board_of_project,
    on_session_board,
    session_owner_or_pm_on_board,
    on_project_or_pm_on_board,
    correct_user_or_shared_board_pm,
    on_shared_board,
]


@pytest.fixture
def graph(factory):
    """Two boards. The PM and the member sit on board one only."""
    pm = factory.user("pm", is_pm=True)
    member = factory.user("member")
    outsider_pm = factory.user("outsider", is_pm=True)
    board_one = factory.board("One", members=[pm, member])
    board_two = factory.board("Two", members=[outsider_pm])
    project_one = factory.project(board_one, "Alpha", members=[member])
    project_two = factory.project(board_two, "Beta")
    session_one = factory.session(project_one, member)
    session_two = factory.session(project_two, outsider_pm)
    return {
        "pm": pm,
        "member": member,
        "outsider_pm": outsider_pm,
        "board_one": board_one,
        "board_two": board_two,
        "project_one": project_one,
        "project_two": project_two,
        "session_one": session_one,
        "session_two": session_two,
    }


def test_actor_variants():
    assert actor_from_claims(1, "a@b.com", True) == ProjectManager(id=1, email="a@b.com")
    assert actor_from_claims(2, "c@d.com", False) == Member(id=2, email="c@d.com")
    assert ProjectManager(id=1, email="a@b.com").is_pm is True
    assert Member(id=2, email="c@d.com").is_pm is False


@pytest.mark.parametrize("predicate", ALL_PREDICATES, ids=lambda p: p.__name__)
def test_anonymous_requests_are_denied_without_lookups(context, predicate):
    # None of these ids exist: a deny must come before any NotFound.
    ctx = context(board_id=1, project_id=1, session_id=1, user_id=1)
    assert predicate(ctx) is False


def test_logged_in_and_is_pm(context, graph):
    assert logged_in(context(graph["member"])) is True
    assert is_pm(context(graph["member"])) is False
    assert is_pm(context(graph["pm"])) is True


def test_correct_user_or_pm(context, graph):
    member, pm = graph["member"], graph["pm"]

    assert correct_user_or_pm(context(member, user_id=member.id)) is True
    assert correct_user_or_pm(context(member, user_id=pm.id)) is False
    assert correct_user_or_pm(context(pm, user_id=member.id)) is True


def test_on_board(context, graph):
    assert on_board(context(graph["member"], board_id=graph["board_one"].id)) is True
    assert on_board(context(graph["member"], board_id=graph["board_two"].id)) is False


def test_on_board_missing_board_is_not_found(context, graph):
    with pytest.raises(NotFoundError):
        on_board(context(graph["member"], board_id=999))


def test_pm_override_is_scoped_to_the_pms_boards(context, graph):
    pm = graph["pm"]

    assert on_board_of_project(context(pm, project_id=graph["project_one"].id)) is True
    assert on_board_of_project(context(pm, project_id=graph["project_two"].id)) is False


def test_on_board_of_project_missing_project_is_not_found(context, graph):
    with pytest.raises(NotFoundError) as exc:
        on_board_of_project(context(graph["pm"], project_id=999))
    assert exc.value.detail == "no project found"


def test_on_session_board(context, graph):
    member = graph["member"]

    assert on_session_board(context(member, session_id=graph["session_one"].id)) is True
    assert on_session_board(context(member, session_id=graph["session_two"].id)) is False
    with pytest.raises(NotFoundError):
        on_session_board(context(member, session_id=999))


class TestSessionOwnerOrPmOnBoard:
    def test_denies_non_owner_non_pm(self, context, factory, graph):
        colleague = factory.user("colleague")
        factory.join_board(colleague, graph["board_one"])

        ctx = context(colleague, session_id=graph["session_one"].id)
        assert session_owner_or_pm_on_board(ctx) is False

    def test_denies_pm_not_on_the_sessions_board(self, context, graph):
        ctx = context(graph["outsider_pm"], session_id=graph["session_one"].id)
        assert session_owner_or_pm_on_board(ctx) is False

    def test_allows_owner_regardless_of_pm_status(self, context, factory, graph):
        assert session_owner_or_pm_on_board(context(graph["member"], session_id=graph["session_one"].id)) is True

        # Ownership alone is enough, even off the board.
        loner_pm = factory.user("loner", is_pm=True)
        own_session = factory.session(graph["project_one"], loner_pm)
        assert session_owner_or_pm_on_board(context(loner_pm, session_id=own_session.id)) is True

    def test_allows_pm_on_the_board_regardless_of_ownership(self, context, graph):
        ctx = context(graph["pm"], session_id=graph["session_one"].id)
        assert session_owner_or_pm_on_board(ctx) is True

    def test_missing_session_is_not_found(self, context, graph):
        with pytest.raises(NotFoundError) as exc:
            session_owner_or_pm_on_board(context(graph["pm"], session_id=999))
        assert exc.value.detail == "no session found"


class TestOnProjectOrPmOnBoard:
    def test_allows_project_member_without_board_membership(self, context, factory, graph):
        contractor = factory.user("contractor")
        project = factory.project(graph["board_two"], "Gamma", members=[contractor])

        assert on_project_or_pm_on_board(context(contractor, project_id=project.id)) is True

    def test_allows_pm_on_board_without_project_membership(self, context, graph):
        assert on_project_or_pm_on_board(context(graph["pm"], project_id=graph["project_one"].id)) is True

    def test_denies_board_member_who_is_not_pm_nor_assigned(self, context, factory, graph):
        project = factory.project(graph["board_one"], "Unassigned")

        assert on_project_or_pm_on_board(context(graph["member"], project_id=project.id)) is False

    def test_denies_pm_of_another_board(self, context, graph):
        assert on_project_or_pm_on_board(context(graph["outsider_pm"], project_id=graph["project_one"].id)) is False

    def test_missing_project_is_not_found(self, context, graph):
        with pytest.raises(NotFoundError):
            on_project_or_pm_on_board(context(graph["member"], project_id=999))


class TestSharedBoards:
    def test_correct_user(self, context, graph):
        member = graph["member"]
        assert correct_user_or_shared_board_pm(context(member, user_id=member.id)) is True

    def test_pm_sharing_a_board(self, context, graph):
        assert correct_user_or_shared_board_pm(context(graph["pm"], user_id=graph["member"].id)) is True

    def test_pm_without_a_shared_board(self, context, graph):
        ctx = context(graph["outsider_pm"], user_id=graph["member"].id)
        assert correct_user_or_shared_board_pm(ctx) is False

    def test_member_sharing_a_board_is_not_enough_to_edit(self, context, graph):
        ctx = context(graph["member"], user_id=graph["pm"].id)
        assert correct_user_or_shared_board_pm(ctx) is False

    def test_on_shared_board(self, context, graph):
        member = graph["member"]
        assert on_shared_board(context(member, user_id=graph["pm"].id)) is True
        assert on_shared_board(context(member, user_id=member.id)) is True
        assert on_shared_board(context(member, user_id=graph["outsider_pm"].id)) is False

    def test_missing_target_user_is_not_found(self, context, graph):
        with pytest.raises(NotFoundError):
            on_shared_board(context(graph["member"], user_id=999))
        with pytest.raises(NotFoundError):
            correct_user_or_shared_board_pm(context(graph["pm"], user_id=999))
