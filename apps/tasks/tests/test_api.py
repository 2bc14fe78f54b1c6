"""
Integration tests for the tasks API endpoints.
Tests status codes, response envelopes and the full create → read →
update → delete flow over HTTP.
"""
import json
from datetime import timedelta
from unittest.mock import patch
from uuid import uuid4

from django.db import DatabaseError
from django.test import Client, TestCase, override_settings
from django.utils import timezone

from apps.tasks import constants as c
from apps.tasks.api import task_service
from apps.tasks.models import Task, TaskStatus

TASKS_URL = '/api/tasks'


class TaskAPITestCase(TestCase):

    def setUp(self):
        self.client = Client()

    def post_json(self, url, payload):
        return self.client.post(url, data=json.dumps(payload), content_type='application/json')

    def put_json(self, url, payload):
        return self.client.put(url, data=json.dumps(payload), content_type='application/json')

    def create_task(self, title='Buy milk', **extra):
        response = self.post_json(TASKS_URL, {'title': title, **extra})
        self.assertEqual(response.status_code, 201)
        return response.json()['data']


class TaskLifecycleAPITest(TaskAPITestCase):

    def test_full_lifecycle(self):
        """Create, fetch, complete, delete, then fetch again."""
        response = self.post_json(TASKS_URL, {'title': 'Buy milk'})
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertTrue(body['success'])
        self.assertEqual(body['message'], 'Task created successfully')
        self.assertEqual(body['data']['status'], 'PENDING')
        task_id = body['data']['id']

        response = self.client.get(f'{TASKS_URL}/{task_id}')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data']['title'], 'Buy milk')

        response = self.put_json(f'{TASKS_URL}/{task_id}', {'status': 'COMPLETED'})
        self.assertEqual(response.status_code, 200)
        data = response.json()['data']
        self.assertEqual(data['status'], 'COMPLETED')
        self.assertEqual(data['title'], 'Buy milk')
        self.assertEqual(response.json()['message'], 'Task updated successfully')

        response = self.client.delete(f'{TASKS_URL}/{task_id}')
        self.assertEqual(response.status_code, 204)
        self.assertEqual(response.content, b'')

        response = self.client.get(f'{TASKS_URL}/{task_id}')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {
            'success': False,
            'error': f'Task with ID {task_id} not found',
        })


class CreateTaskAPITest(TaskAPITestCase):

    def test_task_fields_on_the_wire(self):
        data = self.create_task('Write report', description='Q3 numbers')
        self.assertEqual(
            set(data),
            {'id', 'title', 'description', 'status', 'createdAt', 'updatedAt'},
        )
        self.assertEqual(data['description'], 'Q3 numbers')
        self.assertEqual(data['createdAt'], data['updatedAt'])

    def test_omitted_description_is_null(self):
        data = self.create_task('No details')
        self.assertIsNone(data['description'])

    def test_empty_title(self):
        response = self.post_json(TASKS_URL, {'title': ''})
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertFalse(body['success'])
        self.assertIn('Title is required', body['error'])

    def test_missing_title(self):
        response = self.post_json(TASKS_URL, {'description': 'orphan'})
        self.assertEqual(response.status_code, 400)
        self.assertIn('Title is required', response.json()['error'])

    def test_title_too_long(self):
        response = self.post_json(TASKS_URL, {'title': 'x' * 201})
        self.assertEqual(response.status_code, 400)
        self.assertIn('200 characters', response.json()['error'])

    def test_validation_failure_writes_nothing(self):
        self.post_json(TASKS_URL, {'title': 't', 'description': 'd' * 5001})
        self.assertEqual(Task.objects.count(), 0)

    def test_malformed_json(self):
        response = self.client.post(TASKS_URL, data='{"title": ', content_type='application/json')
        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.json()['success'])

    def test_non_object_body(self):
        response = self.client.post(TASKS_URL, data='["Buy milk"]', content_type='application/json')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], c.BODY_NOT_OBJECT)
        self.assertEqual(Task.objects.count(), 0)


class GetTaskAPITest(TaskAPITestCase):

    def test_get_matches_created(self):
        created = self.create_task('Call mum')
        response = self.client.get(f"{TASKS_URL}/{created['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'success': True, 'data': created})

    def test_unknown_id(self):
        response = self.client.get(f'{TASKS_URL}/{uuid4()}')
        self.assertEqual(response.status_code, 404)
        self.assertFalse(response.json()['success'])

    def test_malformed_id(self):
        response = self.client.get(f'{TASKS_URL}/not-a-real-id')
        self.assertEqual(response.status_code, 404)


class UpdateTaskAPITest(TaskAPITestCase):

    def test_partial_update(self):
        created = self.create_task('Old title', description='keep')
        response = self.put_json(f"{TASKS_URL}/{created['id']}", {'title': 'X'})
        self.assertEqual(response.status_code, 200)
        data = response.json()['data']
        self.assertEqual(data['title'], 'X')
        self.assertEqual(data['description'], 'keep')
        self.assertEqual(data['status'], 'PENDING')
        self.assertEqual(data['createdAt'], created['createdAt'])

    def test_null_description_clears_it(self):
        created = self.create_task('t', description='remove me')
        response = self.put_json(f"{TASKS_URL}/{created['id']}", {'description': None})
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()['data']['description'])

    def test_invalid_status(self):
        created = self.create_task()
        response = self.put_json(f"{TASKS_URL}/{created['id']}", {'status': 'DONE'})
        self.assertEqual(response.status_code, 400)
        self.assertIn('PENDING', response.json()['error'])

    def test_empty_title(self):
        created = self.create_task()
        response = self.put_json(f"{TASKS_URL}/{created['id']}", {'title': ''})
        self.assertEqual(response.status_code, 400)

    def test_unknown_id(self):
        response = self.put_json(f'{TASKS_URL}/{uuid4()}', {'title': 'X'})
        self.assertEqual(response.status_code, 404)

    def test_null_body_is_not_an_update(self):
        created = self.create_task()
        response = self.client.put(f"{TASKS_URL}/{created['id']}", data='null', content_type='application/json')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], c.BODY_NOT_OBJECT)
        stored = self.client.get(f"{TASKS_URL}/{created['id']}").json()['data']
        self.assertEqual(stored['updatedAt'], created['updatedAt'])


class DeleteTaskAPITest(TaskAPITestCase):

    def test_unknown_id(self):
        response = self.client.delete(f'{TASKS_URL}/{uuid4()}')
        self.assertEqual(response.status_code, 404)
        self.assertFalse(response.json()['success'])


class ListTasksAPITest(TaskAPITestCase):

    def setUp(self):
        super().setUp()
        now = timezone.now()
        for minutes_ago, title, status in [
            (30, 'oldest', TaskStatus.COMPLETED),
            (20, 'middle', TaskStatus.PENDING),
            (10, 'newest', TaskStatus.COMPLETED),
        ]:
            stamp = now - timedelta(minutes=minutes_ago)
            Task.objects.create(title=title, status=status, created_at=stamp, updated_at=stamp)

    def test_default_page(self):
        response = self.client.get(TASKS_URL)
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body['success'])
        self.assertEqual(body['total'], 3)
        self.assertEqual(body['limit'], 10)
        self.assertEqual(body['offset'], 0)
        self.assertEqual([t['title'] for t in body['data']], ['newest', 'middle', 'oldest'])

    def test_pagination(self):
        response = self.client.get(TASKS_URL, {'limit': 1, 'offset': 1})
        body = response.json()
        self.assertEqual([t['title'] for t in body['data']], ['middle'])
        self.assertEqual((body['total'], body['limit'], body['offset']), (3, 1, 1))

    def test_status_filter(self):
        response = self.client.get(TASKS_URL, {'status': 'COMPLETED'})
        body = response.json()
        self.assertEqual([t['title'] for t in body['data']], ['newest', 'oldest'])
        self.assertEqual(body['total'], 2)

    def test_invalid_params(self):
        for params in ({'limit': 0}, {'limit': 101}, {'limit': 'many'}, {'offset': -1}, {'status': 'BOGUS'}):
            response = self.client.get(TASKS_URL, params)
            self.assertEqual(response.status_code, 400, params)
            self.assertFalse(response.json()['success'])

    def test_huge_offset_is_rejected(self):
        response = self.client.get(TASKS_URL, {'offset': 10 ** 20})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], c.OFFSET_TOO_LARGE)

    def test_last_valid_offset_returns_empty_page(self):
        response = self.client.get(TASKS_URL, {'offset': c.MAX_OFFSET})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data'], [])
        self.assertEqual(response.json()['total'], 3)


class TasksByStatusAPITest(TaskAPITestCase):

    def test_by_status(self):
        self.create_task('pending one')
        done = self.create_task('done one')
        self.put_json(f"{TASKS_URL}/{done['id']}", {'status': 'COMPLETED'})

        response = self.client.get(f'{TASKS_URL}/filter/by-status', {'status': 'COMPLETED'})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual([t['title'] for t in body['data']], ['done one'])
        self.assertNotIn('total', body)

    def test_bogus_status(self):
        response = self.client.get(f'{TASKS_URL}/filter/by-status', {'status': 'BOGUS'})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Status must be either "PENDING" or "COMPLETED"')

    def test_missing_status(self):
        response = self.client.get(f'{TASKS_URL}/filter/by-status')
        self.assertEqual(response.status_code, 400)


class ErrorBoundaryAPITest(TaskAPITestCase):

    @override_settings(IS_PRODUCTION=False)
    def test_unexpected_error_shown_outside_production(self):
        with patch.object(task_service, 'get_by_id', side_effect=RuntimeError('boom')):
            response = self.client.get(f'{TASKS_URL}/{uuid4()}')
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'success': False, 'error': 'boom'})

    @override_settings(IS_PRODUCTION=True)
    def test_unexpected_error_hidden_in_production(self):
        with patch.object(task_service, 'get_by_id', side_effect=RuntimeError('secret detail')):
            response = self.client.get(f'{TASKS_URL}/{uuid4()}')
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()['error'], 'Internal server error')

    def test_unsupported_method(self):
        response = self.client.patch(TASKS_URL, data='{}', content_type='application/json')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'success': False, 'error': 'Endpoint not found'})

    @override_settings(IS_PRODUCTION=False)
    def test_storage_failure_shown_outside_production(self):
        with patch.object(Task.objects, 'using', side_effect=DatabaseError('disk')):
            response = self.client.get(TASKS_URL)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'success': False, 'error': 'Failed to list tasks: disk'})

    @override_settings(IS_PRODUCTION=True)
    def test_storage_failure_hidden_in_production(self):
        with patch.object(Task.objects, 'using', side_effect=DatabaseError('disk')):
            response = self.post_json(TASKS_URL, {'title': 'Buy milk'})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {'success': False, 'error': 'Internal server error'})
