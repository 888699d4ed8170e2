###############################################################################
# Sequence settings
###############################################################################

# The only characters we let into a k-mer graph. Anything else gets replaced
# with SANITIZE_CHAR before we count k-mers.
ALPHABET = "ACGT"
SANITIZE_CHAR = "A"

COMPLEMENT = {"A": "T", "C": "G", "G": "C", "T": "A"}

# Upstream stages pack several independently-assembled sequences into one
# FASTA record, separated by this character. No k-mer should span it.
BUNDLE_DELIM = "X"

###############################################################################
# Accession settings
###############################################################################

# In per-record mode, the component ID of a record is embedded in its
# accession: e.g. "s_123" or "comp_123_extra" both belong to component 123.
ACCESSION_SEP = "_"
ACCESSION_COMPONENT_TOKEN = 1

###############################################################################
# Output settings
###############################################################################

# Field tags used in the Chrysalis-format output. Each graph is written as a
# header line, followed by one line per node and then one line per edge, all
# tab-separated. See KmerGraph.to_chrysalis_format() for details.
CHRYSALIS_HEADER = "Component"
CHRYSALIS_NODE = "N"
CHRYSALIS_EDGE = "E"
CHRYSALIS_SEP = "\t"
CHRYSALIS_KV_SEP = "="
CHRYSALIS_K = "k"
CHRYSALIS_SS = "strand_specific"
CHRYSALIS_NUM_NODES = "nodes"
CHRYSALIS_NUM_EDGES = "edges"

# Indentation used for edges in KmerGraph.to_string() output
INDENT = "  "

###############################################################################
# Miscellaneous settings
###############################################################################

# Separator for splitting a single --fasta value into multiple filenames
FASTA_LIST_SEP = ","

# Used to create lines in logging output like =====
SEPBIG = "="
SEPSML = "-"

# --monitor levels
MONITOR_INFO = 1
MONITOR_DEBUG = 2
MONITOR_SEQS = 3

MIN_THREADS = 1
MIN_K = 1
