import asyncio

import pytest

from config import config
from models import User
from repositories.user_repository import InMemoryUserRepository, UserLookup
from services.saved_state import SavedStateHandle
from viewmodels.user_detail_view_model import (
    Found,
    Loading,
    NotFound,
    UserDetailViewModel,
    extract_user_id,
)


class GatedRepository(UserLookup):
    """Holds every fetch until `release` is set."""

    def __init__(self):
        self.release = asyncio.Event()
        self.inner = InMemoryUserRepository(delay=0)

    async def fetch(self, user_id):
        await self.release.wait()
        return await self.inner.fetch(user_id)


def handle_for(value):
    return SavedStateHandle({config.Keys.USER_ID_ARG: value})


@pytest.mark.parametrize("raw, expected", [
    (202, 202),
    ("303", 303),
    (" 101 ", 101),
    ("abc", None),
    ("", None),
    ("1_01", None),
    ("+101", None),
    ("\u0661\u0660\u0661", None),
    ("-5", -5),
    (True, None),
    (None, None),
])
def test_extract_user_id(raw, expected):
    assert extract_user_id(handle_for(raw)) == expected


def test_extract_user_id_missing_key():
    assert extract_user_id(SavedStateHandle()) is None


@pytest.mark.asyncio
async def test_id_202_resolves_to_ben(fast_repository):
    vm = UserDetailViewModel(handle_for(202), fast_repository)
    assert vm.state.value == Loading()
    state = await vm.load()
    assert state == Found(User(202, "Ben Miller", "ben@example.com"))


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id", [1, 404, 2020])
async def test_unknown_id_is_not_found(fast_repository, user_id):
    vm = UserDetailViewModel(handle_for(user_id), fast_repository)
    assert await vm.load() == NotFound()


@pytest.mark.asyncio
async def test_state_is_loading_while_pending_then_exactly_one_result():
    repo = GatedRepository()
    vm = UserDetailViewModel(handle_for(303), repo)
    seen = []
    vm.state.subscribe(seen.append)

    task = asyncio.ensure_future(vm.load())
    await asyncio.sleep(0)
    assert isinstance(vm.state.value, Loading)

    repo.release.set()
    await task
    assert seen == [Loading(), Found(User(303, "Cathy Lee", "cathy@example.com"))]


@pytest.mark.asyncio
async def test_absent_id_goes_straight_to_not_found(fast_repository):
    vm = UserDetailViewModel(SavedStateHandle(), fast_repository)
    seen = []
    vm.state.subscribe(seen.append)
    await vm.load()
    assert seen == [NotFound()]


@pytest.mark.asyncio
async def test_result_discarded_after_close():
    repo = GatedRepository()
    vm = UserDetailViewModel(handle_for(101), repo)
    task = asyncio.ensure_future(vm.load())
    await asyncio.sleep(0)
    vm.close()
    repo.release.set()
    await task
    assert vm.state.value == Loading()


@pytest.mark.asyncio
async def test_id_travels_through_route(nav, fast_repository):
    nav.navigate("user_list")
    entry = nav.navigate(config.Routes.user_detail(101))
    vm = UserDetailViewModel(entry.saved_state, fast_repository)
    state = await vm.load()
    assert state.user.name == "Anya Smith"


@pytest.mark.asyncio
async def test_malformed_route_id_is_not_found(nav, fast_repository):
    entry = nav.navigate("user_detail/not-a-number")
    vm = UserDetailViewModel(entry.saved_state, fast_repository)
    assert vm.state.value == NotFound()
