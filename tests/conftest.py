import pytest

from data_models import Participant


@pytest.fixture
def alice():
    return Participant(id="p1", name="Alice", email="alice@example.com", phone="+911111111111")


@pytest.fixture
def bob():
    return Participant(id="p2", name="Bob", email="bob@example.com")


@pytest.fixture
def carol():
    return Participant(id="p3", name="Carol", phone="+913333333333")


@pytest.fixture
def trio(alice, bob, carol):
    return [alice, bob, carol]


@pytest.fixture
def members_csv(tmp_path):
    path = tmp_path / "members.csv"
    path.write_text(
        "id,name,email,phone\n"
        "p1,Alice,alice@example.com,+911111111111\n"
        "p2,Bob,bob@example.com,\n"
        "p3,Carol,,+913333333333\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def payments_csv(tmp_path):
    path = tmp_path / "payments.csv"
    path.write_text(
        "participant_id,amount,method,notes\n"
        "p2,100,upi,first half\n"
        "p2,50,cash,\n"
        "p3,150,card,\n",
        encoding="utf-8",
    )
    return path
