# -*- coding: utf-8 -*-
from __future__ import annotations
from django.urls import path
from projects.views.project import (
    ProjectListCreateAPIView,
    MyProjectsAPIView,
    ProjectDetailAPIView,
    ProjectAddMembersAPIView,
    ProjectRemoveMembersAPIView,
)
from projects.views.sprint import SprintListCreateAPIView, SprintDetailAPIView

app_name = "projects"

urlpatterns = [
    path("", ProjectListCreateAPIView.as_view(), name="project-list-create"),
    path("my/", MyProjectsAPIView.as_view(), name="my-projects"),
    path("<int:project_id>/", ProjectDetailAPIView.as_view(), name="project-detail"),
    path("<int:project_id>/add-members/", ProjectAddMembersAPIView.as_view(), name="project-add-members"),
    path("<int:project_id>/remove-members/", ProjectRemoveMembersAPIView.as_view(), name="project-remove-members"),

    # Sprints
    path("<int:project_id>/sprints/", SprintListCreateAPIView.as_view(), name="sprint-list-create"),
    path("sprints/<int:sprint_id>/", SprintDetailAPIView.as_view(), name="sprint-detail"),
]
