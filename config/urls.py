"""
URL configuration for the TaskMaster API.
"""
from django.urls import path, re_path
from ninja import NinjaAPI

from apps.core.handlers import register_exception_handlers
from apps.core.views import endpoint_not_found, health

api = NinjaAPI(
    title="TaskMaster API",
    version="1.0.0",
    description="Task management API",
    docs_url="/docs",
)

register_exception_handlers(api)

from apps.tasks.api import router as tasks_router

api.add_router("/tasks", tasks_router)

urlpatterns = [
    path('health', health),
    path('api/', api.urls),
    # Anything unmatched, with or without DEBUG
    re_path(r'^.*$', endpoint_not_found),
]

handler404 = 'apps.core.views.endpoint_not_found'
handler500 = 'apps.core.views.server_error'
