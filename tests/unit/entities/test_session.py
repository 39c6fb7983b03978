"""Unit tests for users and session authority."""

from domain.entities.session import SessionContext, User, UserRole, elect_active_gm


class TestElectActiveGm:
    def test_lowest_id_among_active_gms(self):
        users = [
            User(id="gm2", name="Second", role=UserRole.GAMEMASTER, active=True),
            User(id="gm1", name="First", role=UserRole.GAMEMASTER, active=True),
            User(id="aaa", name="Player", role=UserRole.PLAYER, active=True),
        ]

        assert elect_active_gm(users).id == "gm1"

    def test_ignores_disconnected_gm(self):
        users = [
            User(id="gm1", name="Away", role=UserRole.GAMEMASTER, active=False),
            User(id="gm2", name="Here", role=UserRole.ASSISTANT, active=True),
        ]

        assert elect_active_gm(users).id == "gm2"

    def test_none_without_gm(self):
        users = [User(id="p1", name="Player", role=UserRole.TRUSTED, active=True)]

        assert elect_active_gm(users) is None


class TestSessionContext:
    def test_gm_session_is_authority(self):
        users = [User(id="gm1", name="GM", role=UserRole.GAMEMASTER, active=True)]

        session = SessionContext.for_user("gm1", users)

        assert session.is_primary_authority

    def test_player_session_is_not_authority(self):
        users = [
            User(id="gm1", name="GM", role=UserRole.GAMEMASTER, active=True),
            User(id="p1", name="Player", active=True),
        ]

        session = SessionContext.for_user("p1", users)

        assert session.active_gm_id == "gm1"
        assert not session.is_primary_authority

    def test_no_authority_without_active_gm(self):
        session = SessionContext.for_user("p1", [])

        assert not session.is_primary_authority
