from django.urls import path
from . import views

urlpatterns = [
    # --- API ENDPOINTS ---
    path('api/feasibility/', views.feasibility_api, name='feasibility_api'),
    path('api/health/', views.health_api, name='health_api'),
]
