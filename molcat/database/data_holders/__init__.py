from .transition_cache import TransitionCache, TransitionCacheEntry
from .transition_data_holder import TransitionDataHolder
