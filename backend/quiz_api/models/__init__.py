from quiz_api.models.admin import Admin
from quiz_api.models.element import Element
from quiz_api.models.ranking import RankingEntry
