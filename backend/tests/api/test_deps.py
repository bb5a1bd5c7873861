import pytest
from pytest_mock import MockerFixture

from screamscore.api.deps import require_admin
from screamscore.core.config import settings
from screamscore.exceptions.base import AdminRequiredError


def test_require_admin_accepts_matching_token():
    require_admin(x_admin_token="test-admin-token")


def test_require_admin_rejects_wrong_or_missing_token():
    with pytest.raises(AdminRequiredError):
        require_admin(x_admin_token="wrong")
    with pytest.raises(AdminRequiredError):
        require_admin(x_admin_token=None)


def test_require_admin_rejects_everything_without_configured_token(
    mocker: MockerFixture,
):
    mocker.patch.object(settings, "ADMIN_TOKEN", None)

    with pytest.raises(AdminRequiredError):
        require_admin(x_admin_token=None)
    with pytest.raises(AdminRequiredError):
        require_admin(x_admin_token="")
