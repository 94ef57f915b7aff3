# A city is destroyed the moment it holds this many aliens
MAX_OCCUPANTS = 2
