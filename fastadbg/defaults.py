STRAND_SPECIFIC = False
GRAPH_PER_RECORD = False
TO_STRING = False
THREADS = 1
MONITOR = 0
