from .auth import user_login, register, user_logout
from .home import home
from .listings import catalog, listing_detail, create_listing, edit_listing, delete_listing, my_listings
from .comments import post_comment, delete_comment
from .favorites import my_favorites, toggle_listing_favorite
from .users import profile
