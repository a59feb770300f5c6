"""
Write (and read back) Garmin Training Center XML, version 2 [1]_.

Power and cadence go in the ActivityExtension v2 namespace [2]_, which is
what Strava, TrainingPeaks and Garmin Connect look for.


.. [1] https://www8.garmin.com/xmlschemas/TrainingCenterDatabasev2.xsd
.. [2] https://www8.garmin.com/xmlschemas/ActivityExtensionv2.xsd

"""
from perfpro.tcx._writing import serialize, write
from perfpro.tcx._reading import read_and_format as read
from perfpro.tcx._reading import gen_records
