class CollectionNames:
    """Names of every MongoDB collection used by the app."""

    URL_SUMMARIES = "url_summaries"
