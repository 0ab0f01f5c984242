from .cohort import parse_cohort
from .docket import DocketEntry, DocketStats, docket_wait_times, summarize
from .errors import InvalidCapacityError, InvalidSlotDurationError, MalformedCohortError
from .scheduler import RankScheduler, build_scheduler, compute_wait_time
