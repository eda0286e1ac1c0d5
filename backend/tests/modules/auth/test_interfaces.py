from modules.auth.interfaces import IAuthService
from modules.auth.service import AuthService


class TestAuthInterface:
    def test_interface_methods_exist(self):
        """IAuthService should define the token and metadata operations."""
        methods = [
            "validate_token",
            "get_user_by_id",
            "get_private_metadata",
            "update_private_metadata",
        ]
        for method in methods:
            assert hasattr(IAuthService, method)
            assert callable(getattr(AuthService, method))

    def test_service_satisfies_protocol(self, test_settings, mock_db):
        """AuthService instances should pass isinstance against the protocol."""
        assert isinstance(AuthService(db=mock_db, settings=test_settings), IAuthService)
