"""Integration tests for the ListNodesUseCase."""

import pytest

from app.features.mindmap.dtos import ListNodesRequest
from app.features.mindmap.usecases import ListNodesUseCaseImpl
from app.features.mindmap.usecases.nodes.list_nodes_usecase import MAX_OFFSET


@pytest.fixture
async def five_nodes(create_node):
    """Create five nodes, oldest first."""
    return [await create_node(f"Node {i}") for i in range(5)]


class TestListNodesUseCase:
    """Test suite for the ListNodesUseCase."""

    async def test_list_nodes_empty(self, get_db_session):
        use_case = ListNodesUseCaseImpl(get_db_session=get_db_session)

        response = await use_case.execute(ListNodesRequest())

        assert response.nodes == []
        assert response.total == 0

    async def test_list_nodes_newest_first(self, get_db_session, five_nodes):
        use_case = ListNodesUseCaseImpl(get_db_session=get_db_session)

        response = await use_case.execute(ListNodesRequest())

        assert response.total == 5
        assert [node.title for node in response.nodes] == [
            "Node 4",
            "Node 3",
            "Node 2",
            "Node 1",
            "Node 0",
        ]

    async def test_list_nodes_with_pagination(self, get_db_session, five_nodes):
        """Test that limit/offset select a page while total counts everything."""
        use_case = ListNodesUseCaseImpl(get_db_session=get_db_session)

        first_page = await use_case.execute(ListNodesRequest(limit=2, offset=0))
        second_page = await use_case.execute(ListNodesRequest(limit=2, offset=2))
        last_page = await use_case.execute(ListNodesRequest(limit=2, offset=4))

        assert first_page.total == 5
        assert [n.id for n in first_page.nodes] == [five_nodes[4].id, five_nodes[3].id]
        assert [n.id for n in second_page.nodes] == [five_nodes[2].id, five_nodes[1].id]
        assert [n.id for n in last_page.nodes] == [five_nodes[0].id]
        assert second_page.total == last_page.total == 5

    async def test_offset_past_end_returns_empty_page(self, get_db_session, five_nodes):
        use_case = ListNodesUseCaseImpl(get_db_session=get_db_session)

        response = await use_case.execute(ListNodesRequest(limit=10, offset=50))

        assert response.nodes == []
        assert response.total == 5

    async def test_negative_limit_is_clamped_to_zero(self, get_db_session, five_nodes):
        use_case = ListNodesUseCaseImpl(get_db_session=get_db_session)

        response = await use_case.execute(ListNodesRequest(limit=-1))

        assert response.nodes == []
        assert response.total == 5

    async def test_negative_offset_is_clamped_to_zero(self, get_db_session, five_nodes):
        use_case = ListNodesUseCaseImpl(get_db_session=get_db_session)

        response = await use_case.execute(ListNodesRequest(limit=2, offset=-3))

        assert [n.id for n in response.nodes] == [five_nodes[4].id, five_nodes[3].id]

    async def test_oversized_limit_is_capped(self, get_db_session, five_nodes):
        use_case = ListNodesUseCaseImpl(get_db_session=get_db_session, max_limit=3)

        response = await use_case.execute(ListNodesRequest(limit=1_000_000))

        assert len(response.nodes) == 3
        assert response.total == 5

    async def test_huge_offset_is_capped(self, get_db_session, five_nodes):
        """Test that an offset beyond a 64-bit integer still returns a page."""
        use_case = ListNodesUseCaseImpl(get_db_session=get_db_session)

        response = await use_case.execute(ListNodesRequest(limit=2, offset=2**64))

        assert response.nodes == []
        assert response.total == 5

    async def test_max_offset_is_accepted(self, get_db_session, five_nodes):
        use_case = ListNodesUseCaseImpl(get_db_session=get_db_session)

        response = await use_case.execute(ListNodesRequest(offset=MAX_OFFSET))

        assert response.nodes == []
        assert response.total == 5
