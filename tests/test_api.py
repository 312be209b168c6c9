# tests/test_api.py

import pytest

from tasks.models import Task

pytestmark = pytest.mark.django_db


def iso(value):
    """Render a datetime the way the API does."""
    text = value.isoformat()
    return text[:-6] + 'Z' if text.endswith('+00:00') else text


# --- create ---

def test_create_returns_new_task(api_client, clock):
    response = api_client.post('/tasks', {'title': 'Write report', 'description': 'Q3 numbers'}, format='json')

    assert response.status_code == 201
    task = response.json()
    assert task['id']
    assert task['title'] == 'Write report'
    assert task['description'] == 'Q3 numbers'
    assert task['completed_at'] is None
    assert task['created_at'] == task['updated_at'] == iso(clock.calls[-1])
    assert Task.objects.filter(id=task['id']).exists()


def test_create_accepts_missing_and_empty_fields(api_client):
    response = api_client.post('/tasks', {}, format='json')
    assert response.status_code == 201
    assert response.json()['title'] is None
    assert response.json()['description'] is None

    response = api_client.post('/tasks', {'title': '', 'description': '  padded  '}, format='json')
    assert response.status_code == 201
    assert response.json()['title'] == ''
    assert response.json()['description'] == '  padded  '


def test_create_generates_unique_ids(create_task):
    ids = {create_task(title=f'task {i}')['id'] for i in range(5)}
    assert len(ids) == 5


def test_create_rejects_non_string_title(api_client):
    response = api_client.post('/tasks', {'title': ['a', 'b']}, format='json')

    assert response.status_code == 400
    assert response.json()['error'].startswith('title:')
    assert Task.objects.count() == 0


@pytest.mark.parametrize('title', [True, {'a': 1}])
def test_create_rejects_bool_and_object_title(api_client, title):
    response = api_client.post('/tasks', {'title': title}, format='json')

    assert response.status_code == 400
    assert Task.objects.count() == 0


def test_create_coerces_number_title(api_client):
    response = api_client.post('/tasks', {'title': 42}, format='json')

    assert response.status_code == 201
    assert response.json()['title'] == '42'


def test_create_rejects_malformed_json(api_client):
    response = api_client.post('/tasks', data='{"title": ', content_type='application/json')

    assert response.status_code == 400
    assert set(response.json()) == {'error'}


# --- list / search ---

def test_list_includes_every_task_once(api_client, create_task):
    created = [create_task(title=f'task {i}') for i in range(3)]

    response = api_client.get('/tasks')

    assert response.status_code == 200
    ids = [task['id'] for task in response.json()]
    for task in created:
        assert ids.count(task['id']) == 1


def test_list_empty_store(api_client):
    response = api_client.get('/tasks')
    assert response.status_code == 200
    assert response.json() == []


def test_list_filters_by_title_substring(api_client, create_task):
    match = create_task(title='xxabcxx', description='one')
    create_task(title='nothing here', description='abc')

    response = api_client.get('/tasks', {'title': 'abc'})

    assert [task['id'] for task in response.json()] == [match['id']]


def test_list_combines_filters_with_and(api_client, create_task):
    both = create_task(title='groceries list', description='milk and eggs')
    create_task(title='groceries run', description='bread')
    create_task(title='bank', description='milk money')

    response = api_client.get('/tasks', {'title': 'groceries', 'description': 'milk'})

    assert [task['id'] for task in response.json()] == [both['id']]


def test_list_ignores_empty_filters(api_client, create_task):
    create_task(title='one')
    create_task(title='two')

    response = api_client.get('/tasks', {'title': '', 'description': ''})

    assert len(response.json()) == 2


def test_create_then_search_round_trip(api_client, create_task):
    created = create_task(title='Unique title 42', description='round trip')

    response = api_client.get('/tasks', {'title': 'Unique title 42'})

    assert response.json() == [created]


# --- update ---

def test_update_title_only_keeps_description(api_client, create_task):
    task = create_task(title='old', description='keep me')

    response = api_client.put(f'/tasks/{task["id"]}', {'title': 'new'}, format='json')

    assert response.status_code == 200
    assert response.json()['title'] == 'new'
    assert response.json()['description'] == 'keep me'
    stored = Task.objects.get(id=task['id'])
    assert (stored.title, stored.description) == ('new', 'keep me')


def test_update_description_only_keeps_title(api_client, create_task):
    task = create_task(title='keep me', description='old')

    response = api_client.put(f'/tasks/{task["id"]}', {'description': 'new'}, format='json')

    assert response.status_code == 200
    assert response.json()['title'] == 'keep me'
    assert response.json()['description'] == 'new'


def test_update_empty_string_counts_as_supplied(api_client, create_task):
    task = create_task(title='old', description='old')

    response = api_client.put(f'/tasks/{task["id"]}', {'title': ''}, format='json')

    assert response.status_code == 200
    assert response.json()['title'] == ''
    assert response.json()['description'] == 'old'


@pytest.mark.parametrize('body', [{}, {'unrelated': 'x'}])
def test_update_without_fields_is_rejected(api_client, create_task, body):
    task = create_task()

    response = api_client.put(f'/tasks/{task["id"]}', body, format='json')

    assert response.status_code == 400
    assert response.json() == {'error': 'Title or description is required for update'}


def test_update_explicit_null_clears_field(api_client, create_task):
    task = create_task(title='old', description='old')

    response = api_client.put(f'/tasks/{task["id"]}', {'title': None, 'description': 'new'}, format='json')

    assert response.status_code == 200
    assert response.json()['title'] is None
    assert response.json()['description'] == 'new'
    stored = Task.objects.get(id=task['id'])
    assert (stored.title, stored.description) == (None, 'new')


def test_update_refreshes_updated_at_only(api_client, create_task, clock):
    task = create_task()
    completed = api_client.patch(f'/tasks/{task["id"]}/complete').json()

    response = api_client.put(f'/tasks/{task["id"]}', {'title': 'renamed'}, format='json')

    updated = response.json()
    assert updated['created_at'] == task['created_at']
    assert updated['completed_at'] == completed['completed_at']
    assert updated['updated_at'] == iso(clock.calls[-1])
    assert updated['updated_at'] > completed['updated_at']


# --- complete ---

def test_complete_sets_completed_at_and_updated_at(api_client, create_task, clock):
    task = create_task()

    response = api_client.patch(f'/tasks/{task["id"]}/complete')

    assert response.status_code == 200
    done = response.json()
    assert done['completed_at'] is not None
    assert done['completed_at'] == done['updated_at'] == iso(clock.calls[-1])
    assert done['created_at'] == task['created_at']
    assert done['title'] == task['title']


def test_complete_again_advances_timestamps(api_client, create_task, clock):
    task = create_task()
    first = api_client.patch(f'/tasks/{task["id"]}/complete').json()

    second = api_client.patch(f'/tasks/{task["id"]}/complete').json()

    assert second['completed_at'] == second['updated_at']
    assert second['completed_at'] > first['completed_at']


# --- delete ---

def test_delete_removes_task(api_client, create_task):
    task = create_task()
    other = create_task(title='other')

    response = api_client.delete(f'/tasks/{task["id"]}')

    assert response.status_code == 204
    assert response.content == b''
    ids = [t['id'] for t in api_client.get('/tasks').json()]
    assert ids == [other['id']]


def test_deleted_task_is_gone_for_every_operation(api_client, create_task):
    task = create_task()
    api_client.delete(f'/tasks/{task["id"]}')

    assert api_client.delete(f'/tasks/{task["id"]}').status_code == 404
    assert api_client.put(f'/tasks/{task["id"]}', {'title': 'x'}, format='json').status_code == 404
    assert api_client.patch(f'/tasks/{task["id"]}/complete').status_code == 404


@pytest.mark.parametrize('method, path, body', [
    ('put', '/tasks/missing', {'title': 'x'}),
    ('delete', '/tasks/missing', None),
    ('patch', '/tasks/missing/complete', None),
])
def test_unknown_task_returns_404(api_client, method, path, body):
    response = getattr(api_client, method)(path, body, format='json')

    assert response.status_code == 404
    assert response.json() == {'error': 'Task not found'}


def test_unsupported_method_is_json_error(api_client, create_task):
    task = create_task()

    response = api_client.get(f'/tasks/{task["id"]}')

    assert response.status_code == 405
    assert 'error' in response.json()
