from django.urls import path, include
from . import views


urlpatterns = [
    # --- Auth ---
    path('login/', views.user_login, name='login'),
    path('register/', views.register, name='register'),
    path('logout/', views.user_logout, name='logout'),

    # --- Homepage / Listings ---
    path('', views.home, name='home'),
    path('catalog/', views.catalog, name='catalog'),
    path('listing/<str:listing_id>/', views.listing_detail, name='listing_detail'),
    path('create/', views.create_listing, name='create_listing'),
    path('edit/<str:listing_id>/', views.edit_listing, name='edit_listing'),
    path('listing/<str:listing_id>/delete/', views.delete_listing, name='delete_listing'),
    path('my-listings/', views.my_listings, name='my_listings'),

    # --- Comments ---
    path('listing/<str:listing_id>/comments/', views.post_comment, name='post_comment'),
    path('comments/<str:comment_id>/delete/', views.delete_comment, name='delete_comment'),

    # --- Favorites ---
    path('favorites/', views.my_favorites, name='my_favorites'),
    path('listing/<str:listing_id>/favorite/', views.toggle_listing_favorite, name='toggle_favorite'),

    # --- Profile ---
    path('profile/', views.profile, name='profile'),

    path('api/', include('marketplace.api_urls')),
]
