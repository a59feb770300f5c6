from perfpro._types.base import *
from perfpro._types import columns as special_columns
from perfpro._types.activitydata import ActivityData
from perfpro._types.workout import SummaryStats, Trackpoint, Workout
