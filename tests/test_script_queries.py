"""Tests for the read-only script projections."""

import pytest

from scripthub.modules.access import UnauthorizedError
from scripthub.modules.scripts import ScriptNotFoundError, ScriptQueryService, ScriptService

from conftest import ADMIN, ALICE, BOB, script_input


def ids(scripts):
    return [script.id for script in scripts]


class TestListings:
    @pytest.mark.asyncio
    async def test_list_scripts_is_stable(self, session):
        service = ScriptService.with_session(session)
        queries = ScriptQueryService.with_session(session)
        first = await service.create_script(ALICE, script_input(title="a.py"))
        second = await service.create_script(BOB, script_input(title="b.sh", category="Bash"))

        listed = ids(await queries.list_scripts())
        assert set(listed) == {first.id, second.id}
        assert ids(await queries.list_scripts()) == listed

    @pytest.mark.asyncio
    async def test_by_author(self, session):
        service = ScriptService.with_session(session)
        queries = ScriptQueryService.with_session(session)
        mine = await service.create_script(ALICE, script_input())
        await service.create_script(BOB, script_input())

        assert ids(await queries.list_by_author(ALICE)) == [mine.id]
        assert await queries.list_by_author("nobody") == []

    @pytest.mark.asyncio
    async def test_by_category_is_exact_and_case_sensitive(self, session):
        service = ScriptService.with_session(session)
        queries = ScriptQueryService.with_session(session)
        python = await service.create_script(ALICE, script_input(category="Python"))
        await service.create_script(ALICE, script_input(category="Python3"))

        assert ids(await queries.list_by_category("Python")) == [python.id]
        assert await queries.list_by_category("python") == []

    @pytest.mark.asyncio
    async def test_list_categories_only_counts_active_scripts(self, session):
        service = ScriptService.with_session(session)
        queries = ScriptQueryService.with_session(session)
        await service.create_script(ALICE, script_input(category="Python"))
        await service.create_script(ALICE, script_input(category="Bash"))
        await service.create_script(BOB, script_input(category="Python"))
        sql = await service.create_script(BOB, script_input(category="SQL"))
        await service.soft_delete_script(BOB, sql.id)

        assert await queries.list_categories() == ["Bash", "Python"]


class TestTitleSearch:
    @pytest.mark.asyncio
    async def test_case_insensitive_substring(self, session):
        service = ScriptService.with_session(session)
        queries = ScriptQueryService.with_session(session)
        fmt = await service.create_script(ALICE, script_input(title="Format_JSON.py"))
        await service.create_script(ALICE, script_input(title="deploy.sh"))

        assert ids(await queries.search_by_title("json")) == [fmt.id]
        assert ids(await queries.search_by_title("_JS")) == [fmt.id]

    @pytest.mark.asyncio
    async def test_non_ascii_titles_fold(self, session):
        service = ScriptService.with_session(session)
        queries = ScriptQueryService.with_session(session)
        script = await service.create_script(ALICE, script_input(title="Überprüfung.py"))

        assert ids(await queries.search_by_title("überPRÜF")) == [script.id]

    @pytest.mark.asyncio
    async def test_empty_query_returns_nothing(self, session):
        service = ScriptService.with_session(session)
        queries = ScriptQueryService.with_session(session)
        await service.create_script(ALICE, script_input())

        assert await queries.search_by_title("") == []
        assert await queries.search_by_title("   ") == []


class TestDeletedVisibility:
    @pytest.mark.asyncio
    async def test_soft_deleted_script_hidden_from_listings(self, session):
        service = ScriptService.with_session(session)
        queries = ScriptQueryService.with_session(session)
        script = await service.create_script(ALICE, script_input())
        await service.soft_delete_script(ALICE, script.id)

        assert await queries.list_scripts() == []
        assert await queries.list_by_author(ALICE) == []
        assert await queries.list_by_category("Python") == []
        assert await queries.search_by_title("fmt") == []

    @pytest.mark.asyncio
    async def test_get_deleted_script_only_for_author_and_admin(self, session, admin):
        service = ScriptService.with_session(session)
        queries = ScriptQueryService.with_session(session)
        script = await service.create_script(ALICE, script_input())
        await service.soft_delete_script(ALICE, script.id)

        assert (await queries.get_script(ALICE, script.id)).id == script.id
        assert (await queries.get_script(ADMIN, script.id)).id == script.id
        with pytest.raises(ScriptNotFoundError):
            await queries.get_script(BOB, script.id)

    @pytest.mark.asyncio
    async def test_active_script_visible_to_anyone(self, session):
        service = ScriptService.with_session(session)
        queries = ScriptQueryService.with_session(session)
        script = await service.create_script(ALICE, script_input())

        assert (await queries.get_script("stranger", script.id)).title == "fmt.py"

    @pytest.mark.asyncio
    async def test_list_deleted_is_admin_only(self, session, admin):
        service = ScriptService.with_session(session)
        queries = ScriptQueryService.with_session(session)
        first = await service.create_script(ALICE, script_input())
        second = await service.create_script(BOB, script_input())
        await service.create_script(BOB, script_input(title="kept.py"))
        await service.soft_delete_script(ALICE, first.id)
        await service.soft_delete_script(BOB, second.id)

        assert set(ids(await queries.list_deleted(ADMIN))) == {first.id, second.id}
        with pytest.raises(UnauthorizedError):
            await queries.list_deleted(ALICE)

    @pytest.mark.asyncio
    async def test_restore_brings_script_back(self, session):
        service = ScriptService.with_session(session)
        queries = ScriptQueryService.with_session(session)
        script = await service.create_script(ALICE, script_input())
        await service.soft_delete_script(ALICE, script.id)
        await service.restore_script(ALICE, script.id)

        listed = await queries.list_scripts()
        assert ids(listed) == [script.id]
        assert listed[0].deleted_at is None
        assert listed[0].updated_at == script.updated_at

    @pytest.mark.asyncio
    async def test_unknown_id_is_not_found(self, session):
        queries = ScriptQueryService.with_session(session)
        with pytest.raises(ScriptNotFoundError):
            await queries.get_script(ALICE, "no-such-id")
