from .news import Article, ArticleSource  # noqa: F401
from .layout import FeaturedStory, SidebarItem, NewsCard, PageLayout  # noqa: F401
from .state import PageState, SIDEBAR_SLOTS  # noqa: F401
