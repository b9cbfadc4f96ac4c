# -*- coding: utf-8 -*-
from __future__ import annotations
from django.urls import path
from projects.views.review import (
    ReviewCreateAPIView,
    ProjectReviewsAPIView,
    UserReviewsAPIView,
    MyReviewsAPIView,
    MyProjectReviewsAPIView,
)

app_name = "reviews"

urlpatterns = [
    path("add/", ReviewCreateAPIView.as_view(), name="review-create"),
    path("project-reviews/", ProjectReviewsAPIView.as_view(), name="project-reviews"),
    path("user-reviews/", UserReviewsAPIView.as_view(), name="user-reviews"),
    path("my-reviews/", MyReviewsAPIView.as_view(), name="my-reviews"),
    path("my-project-reviews/", MyProjectReviewsAPIView.as_view(), name="my-project-reviews"),
]
