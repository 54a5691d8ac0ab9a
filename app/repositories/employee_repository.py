"""Cosmos DB employee repository with cache-aside reads.

Single employees are cached under their id and the full listing under
``ALL_EMPLOYEES_CACHE_KEY``. Cached entries are never revalidated against the
store; writes refresh or drop them only after the store call has completed.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from azure.cosmos.aio import CosmosClient
from azure.cosmos.exceptions import CosmosResourceNotFoundError

from app.core.cache import CacheBackend, build_cache
from app.core.config import Settings, settings
from app.models.employee import Employee

logger = logging.getLogger(__name__)

ALL_EMPLOYEES_CACHE_KEY = "all_employees"


class EmployeeRepository:
    def __init__(
        self,
        container: Any = None,
        cache: CacheBackend | None = None,
        cache_ttl: int = settings.CACHE_TTL_SECONDS,
    ) -> None:
        self.client: CosmosClient | None = None
        self.container: Any = container
        self.cache = cache
        self.cache_ttl = cache_ttl
        self.initialized: bool = container is not None

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        database_name = settings.COSMOS_DB_DATABASE
        container_name = settings.COSMOS_DB_EMPLOYEES_CONTAINER

        if self.cache is None:
            self.cache = build_cache(settings)
        self.cache_ttl = settings.CACHE_TTL_SECONDS

        if settings.COSMOS_DB_CONNECTION_STRING:
            self.client = CosmosClient.from_connection_string(settings.COSMOS_DB_CONNECTION_STRING)
        elif settings.COSMOS_DB_ENDPOINT and settings.COSMOS_DB_KEY:
            self.client = CosmosClient(settings.COSMOS_DB_ENDPOINT, settings.COSMOS_DB_KEY)
        else:
            logger.warning("Cosmos DB credentials missing; repository not initialized")
            return

        db = self.client.get_database_client(database_name)
        self.container = db.get_container_client(container_name)
        self.initialized = True
        logger.info("EmployeeRepository initialized (container=%s)", container_name)

    async def close(self) -> None:
        if self.cache:
            await self.cache.close()
            self.cache = None
        if self.client:
            await self.client.close()
            self.client = None
        self.container = None
        self.initialized = False

    async def check_connection(self) -> bool:
        if not self.container:
            return False
        try:
            await self.container.read()
            return True
        except Exception:
            logger.exception("Cosmos DB connection check failed")
            return False

    async def get_employee(self, employee_id: str) -> Employee | None:
        container = self._require_container()

        cached = await self._cache_get(employee_id)
        if cached:
            return Employee.from_document(json.loads(cached))

        try:
            raw = await container.read_item(item=employee_id, partition_key=employee_id)
        except CosmosResourceNotFoundError:
            logger.debug("Employee %s not found", employee_id)
            return None

        employee = Employee.from_document(raw)
        await self._cache_set(employee_id, json.dumps(employee.to_document()))
        return employee

    async def get_all_employees(self) -> list[Employee]:
        container = self._require_container()

        cached = await self._cache_get(ALL_EMPLOYEES_CACHE_KEY)
        if cached:
            return [Employee.from_document(doc) for doc in json.loads(cached)]

        employees: list[Employee] = []
        async for item in container.query_items(
            query="SELECT * FROM c",
            enable_cross_partition_query=True,
        ):
            employees.append(Employee.from_document(item))

        if employees:
            payload = json.dumps([employee.to_document() for employee in employees])
            await self._cache_set(ALL_EMPLOYEES_CACHE_KEY, payload)
        return employees

    async def create_employee(self, employee: Employee) -> None:
        container = self._require_container()
        await container.create_item(body=employee.to_document())
        await self._cache_delete(ALL_EMPLOYEES_CACHE_KEY)

    async def update_employee(self, employee: Employee) -> None:
        container = self._require_container()
        await container.upsert_item(body=employee.to_document())
        await self._cache_set(employee.id, json.dumps(employee.to_document()))
        await self._cache_delete(ALL_EMPLOYEES_CACHE_KEY)

    async def delete_employee(self, employee_id: str) -> None:
        container = self._require_container()
        await container.delete_item(item=employee_id, partition_key=employee_id)
        await self._cache_delete(employee_id)
        await self._cache_delete(ALL_EMPLOYEES_CACHE_KEY)

    def _require_container(self) -> Any:
        if not self.container:
            raise RuntimeError("EmployeeRepository not initialized")
        return self.container

    async def _cache_get(self, key: str) -> str | None:
        if self.cache is None:
            return None
        value = await self.cache.get(key)
        logger.debug("Cache %s for %s", "hit" if value else "miss", key)
        return value

    async def _cache_set(self, key: str, value: str) -> None:
        if self.cache is not None:
            await self.cache.set(key, value, self.cache_ttl)

    async def _cache_delete(self, key: str) -> None:
        if self.cache is not None:
            logger.debug("Invalidating cache key %s", key)
            await self.cache.delete(key)
