"""Unit tests for the project ownership policy. No database required."""

import pytest
from types import SimpleNamespace

from projecthub.policies import AuthorizationError, allows, authorize, can_delete, can_update


def _user(user_id):
    return SimpleNamespace(id=user_id)


def _project(owner_id):
    return SimpleNamespace(id=10, owner_id=owner_id)


class TestProjectPolicy:

    def test_owner_can_update_and_delete(self):
        user, project = _user(1), _project(owner_id=1)

        assert can_update(user, project) is True
        assert can_delete(user, project) is True

    def test_non_owner_cannot_update_or_delete(self):
        user, project = _user(2), _project(owner_id=1)

        assert can_update(user, project) is False
        assert can_delete(user, project) is False

    def test_missing_user_is_denied(self):
        assert can_update(None, _project(owner_id=1)) is False

    @pytest.mark.parametrize("ability", ["update", "delete"])
    def test_allows_dispatches_known_abilities(self, ability):
        assert allows(ability, _user(5), _project(owner_id=5)) is True
        assert allows(ability, _user(6), _project(owner_id=5)) is False

    def test_unknown_ability_is_denied_even_for_owner(self):
        assert allows("transfer", _user(5), _project(owner_id=5)) is False

    def test_authorize_passes_silently_for_owner(self):
        assert authorize("update", _user(3), _project(owner_id=3)) is None

    def test_authorize_raises_for_non_owner(self):
        with pytest.raises(AuthorizationError) as exc_info:
            authorize("delete", _user(4), _project(owner_id=3))

        assert exc_info.value.ability == "delete"
        # The message must not reveal who the owner is
        assert "3" not in str(exc_info.value)

    def test_policy_does_not_mutate_inputs(self):
        user, project = _user(1), _project(owner_id=2)
        before = (vars(user).copy(), vars(project).copy())

        allows("update", user, project)

        assert (vars(user), vars(project)) == before
