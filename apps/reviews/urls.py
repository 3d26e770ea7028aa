from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'reviews'

router = DefaultRouter()
router.register(r'', views.ReviewViewSet, basename='review')

urlpatterns = [
    # Review ViewSet routes
    # GET    /api/reviews/                               - List all reviews
    # POST   /api/reviews/                               - Submit review
    # GET    /api/reviews/{id}/                          - Get review
    # DELETE /api/reviews/{id}/                          - Delete review
    # GET    /api/reviews/filter/?pos_id=..&approved=..  - Reviews of a POS by approval status
    # POST   /api/reviews/{id}/approve/                  - Approve review
    path('', include(router.urls)),
]
