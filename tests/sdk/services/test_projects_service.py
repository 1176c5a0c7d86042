import pytest
from pytest_httpx import HTTPXMock

from repoapi._services import ApiClient, ProjectsService


@pytest.fixture
def service(api_client: ApiClient) -> ProjectsService:
    return ProjectsService(api_client)


class TestProjectsService:
    class TestListUserProjects:
        @pytest.mark.asyncio
        async def test_list_user_projects(
            self, httpx_mock: HTTPXMock, service: ProjectsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}/users/42/projects",
                json=[{"id": 1, "name": "ToDo Application"}],
            )

            projects = await service.list_user_projects(42)

            assert projects == [{"id": 1, "name": "ToDo Application"}]

        @pytest.mark.asyncio
        async def test_list_user_projects_with_params(
            self, httpx_mock: HTTPXMock, service: ProjectsService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}/users/42/projects?search=todo&simple=true&archived=false",
                json=[],
            )

            await service.list_user_projects(
                42,
                {"search": "todo", "simple": True, "archived": False, "owned": None},  # type: ignore[typeddict-item]
            )

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert "owned" not in sent_request.url.params

    @pytest.mark.asyncio
    async def test_list_organization_projects(
        self, httpx_mock: HTTPXMock, service: ProjectsService, base_url: str
    ):
        httpx_mock.add_response(
            url=f"{base_url}/groups/my-group/projects?visibility=private",
            json=[{"id": 5}],
        )

        projects = await service.list_organization_projects(
            "my-group", {"visibility": "private"}
        )

        assert projects == [{"id": 5}]

    @pytest.mark.asyncio
    async def test_find_by_name_filters_exact_matches(
        self, httpx_mock: HTTPXMock, service: ProjectsService, base_url: str
    ):
        httpx_mock.add_response(
            url=f"{base_url}/users/42/projects?search=ToDo+Application&simple=true",
            json=[
                {"id": 1, "name": "ToDo Application"},
                {"id": 2, "name": "ToDo Application v2"},
                {"id": 3, "name": "Notes"},
            ],
        )

        projects = await service.find_by_name(42, "ToDo Application")

        assert [p["id"] for p in projects] == [1]
