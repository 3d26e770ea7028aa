from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'pos'

router = DefaultRouter()
router.register(r'', views.PosViewSet, basename='pos')

urlpatterns = [
    # GET    /api/pos/          - List points of sale
    # POST   /api/pos/          - Create point of sale
    # GET    /api/pos/{id}/     - Get point of sale
    # PUT    /api/pos/{id}/     - Update point of sale
    # DELETE /api/pos/{id}/     - Delete point of sale
    path('', include(router.urls)),
]
