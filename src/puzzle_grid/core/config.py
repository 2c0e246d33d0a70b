# config.py

# Cell value treated as impassable by the default Map adjacency
OBSTACLE_MARKER = "#"

# Rotation applied by Grid.rotate() when no direction is given
DEFAULT_ROTATION = "clockwise"

# Only Dijkstra is implemented for now
DEFAULT_ALGORITHM = "dijkstra"
SUPPORTED_ALGORITHMS = ("dijkstra",)

# Unit cost of a step under the default adjacency
DEFAULT_STEP_COST = 1
