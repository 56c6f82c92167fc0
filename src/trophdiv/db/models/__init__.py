from .base import Base
from .run import IndexRun, CommunityIndicesRecord
