from .base import ListQuery
