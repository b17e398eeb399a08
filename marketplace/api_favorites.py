from rest_framework import exceptions, viewsets, status
from rest_framework.response import Response

from .api_permissions import HasMarketplaceSession
from .favorites import get_favorites, is_favorite, toggle_favorite


class FavoriteViewSet(viewsets.ViewSet):
    """
    Favorites of the signed-in user, for pages that toggle without a reload.
    Same local-storage set the HTML views use.
    """

    permission_classes = [HasMarketplaceSession]

    def permission_denied(self, request, message=None, code=None):
        # anonymous callers get the permission's message, not DRF's generic 401 text
        raise exceptions.PermissionDenied(detail=message, code=code)

    # ----------------------------------------
    # GET /api/me/favorites/
    # ----------------------------------------
    def list_favorites(self, request):
        ids = sorted(get_favorites(request.local_storage, request.session_store.user_id))
        return Response({"favorites": ids, "count": len(ids)}, status=status.HTTP_200_OK)

    # ----------------------------------------
    # GET  /api/listings/{id}/favorite/
    # POST /api/listings/{id}/favorite/
    # ----------------------------------------
    def favorite_status(self, request, pk=None):
        favorited = is_favorite(request.local_storage, request.session_store.user_id, pk)
        return Response({"favorited": favorited}, status=status.HTTP_200_OK)

    def toggle_favorite(self, request, pk=None):
        added = toggle_favorite(request.local_storage, request.session_store.user_id, pk)
        message = "Added to favorites" if added else "Removed from favorites"
        return Response({"favorited": added, "message": message}, status=status.HTTP_200_OK)
