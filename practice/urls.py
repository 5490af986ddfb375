from django.urls import path
from . import views

urlpatterns = [
    path('', views.session_list_view, name='session_list'),
    path('upload/', views.upload_session_view, name='session_upload'),
    path('search/', views.session_search_view, name='session_search'),
    path('<int:session_id>/', views.session_detail_view, name='session_detail'),
    path('<int:session_id>/shots/', views.session_shots_view, name='session_shots'),
    path('<int:session_id>/stats/', views.session_stats_view, name='session_stats'),
]
