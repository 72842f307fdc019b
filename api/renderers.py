"""
API renderers.
"""
from rest_framework.renderers import JSONRenderer


class NewlineJSONRenderer(JSONRenderer):
    """JSON renderer whose body is terminated by a newline."""

    def render(self, data, accepted_media_type=None, renderer_context=None):
        body = super().render(data, accepted_media_type, renderer_context)
        if not body:
            return body
        return body + b"\n"
