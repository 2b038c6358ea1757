"""Sheet column name constants."""

# Challenge sheet: gate and shape
STATUS = "status"
CHALLENGE_TYPE = "challenge_type"
SETS = "sets"
TITLE = "title"
DESCRIPTION = "description"
PLACE = "place"
ZONE = "zone"

# Challenge sheet: translations, keyed by locale tag
TRANSLATED_TITLES = {
    "de_ch": "title_de_ch",
    "en_uk": "title_en_uk",
    "fr_ch": "title_fr_ch",
}
TRANSLATED_DESCRIPTIONS = {
    "de_ch": "description_de_ch",
    "en_uk": "description_en_uk",
    "fr_ch": "description_fr_ch",
}

# Challenge sheet: scoring and logistics
KAFFSKALA = "kaffskala"
GRADE = "grade"
BIAS_SAT = "bias_sat"
BIAS_SUN = "bias_sun"
WALKING_TIME = "walking_time"
STATIONARY_TIME = "stationary_time"
ADDITIONAL_POINTS = "additional_points"
MIN_REPS = "min_reps"
MAX_REPS = "max_reps"
POINTS_PER_REP = "points_per_rep"
STATION_DISTANCE = "station_distance"
TIME_TO_HB = "time_to_hb"
DEPARTURES = "departures"

# Challenge sheet: flags
DEAD_END = "dead_end"
NO_DISEMBARK = "no_disembark"
FIXED_POINTS = "fixed_points"
IN_PERIMETER = "in_perim"
COMMENT = "comment"

# Zone sheet
ZONE_NUMBER = "Zone"
ZONE_NUM_CONN_ZONES = "num conn zones"
ZONE_NUM_CONNECTIONS = "num connections"
ZONE_TRAIN_THROUGH = "train through"
ZONE_MONGUS = "Mongus"

# Distance sheet
DISTANCE_FROM = "Zone A"
DISTANCE_TO = "Zone B"
DISTANCE_MINUTES = "Travel Time"
