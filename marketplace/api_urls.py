from django.urls import path

from .api_favorites import FavoriteViewSet

urlpatterns = [
    path('me/favorites/', FavoriteViewSet.as_view({'get': 'list_favorites'}), name='api_favorites'),
    path(
        'listings/<str:pk>/favorite/',
        FavoriteViewSet.as_view({'get': 'favorite_status', 'post': 'toggle_favorite'}),
        name='api_toggle_favorite',
    ),
]
