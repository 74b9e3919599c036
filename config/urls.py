"""
URL configuration for the Productivity Bingo project.
"""
from django.contrib import admin
from django.urls import path
from ninja import NinjaAPI

api = NinjaAPI(
    title="Productivity Bingo API",
    version="1.0.0",
    description="Monthly bingo boards of tolerations and tasks, with rewards for every line won",
    docs_url="/docs",
)

from apps.bingo.api import router as bingo_router
from apps.rewards.api import router as rewards_router
from apps.activity.api import router as activity_router

api.add_router("/bingo/", bingo_router)
api.add_router("/rewards/", rewards_router)
api.add_router("/activity/", activity_router)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', api.urls),
]
