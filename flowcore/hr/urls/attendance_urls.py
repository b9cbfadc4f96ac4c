# -*- coding: utf-8 -*-
from __future__ import annotations
from django.urls import path
from hr.views.attendance_view import ClockInOutView, AttendanceReportView

app_name = "attendance"

urlpatterns = [
    path("inroll/", ClockInOutView.as_view(), name="clock"),
    path("myreport/", AttendanceReportView.as_view(), name="my-report"),
]
