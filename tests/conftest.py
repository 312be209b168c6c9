# tests/conftest.py

import types

import pytest
from rest_framework.test import APIClient

from tasks import urls as task_urls
from tasks import views as task_views

from .fakes import StepClock


@pytest.fixture()
def api_client():
    return APIClient()


@pytest.fixture()
def clock(monkeypatch):
    """Replace the request timestamp source used by the views."""
    fake = StepClock()
    monkeypatch.setattr(task_views, 'timezone', types.SimpleNamespace(now=fake.now))
    return fake


@pytest.fixture()
def import_file(tmp_path, monkeypatch):
    """
    Point the import endpoint at a CSV file in ``tmp_path``.

    Returns a function writing the file content; the file does not exist
    until it is called.
    """
    path = tmp_path / 'tasks.csv'
    monkeypatch.setattr(task_urls.task_service, 'import_path', path)

    def write(content):
        path.write_text(content, encoding='utf-8')
        return path

    write.path = path
    return write


@pytest.fixture()
def create_task(api_client):
    def create(title='Buy milk', description='Two litres'):
        response = api_client.post('/tasks', {'title': title, 'description': description}, format='json')
        assert response.status_code == 201
        return response.json()

    return create
