from django.apps import AppConfig


class CommentmarkConfig(AppConfig):
    name = 'commentmark'
    verbose_name = 'Comment Markdown'
