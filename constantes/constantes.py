# Peso sentinela: o modo não consegue percorrer o segmento
INF = float("inf")

# Modos de deslocamento aceitos pelo motor de caminhos
DRIVING = "driving"
WALKING = "walking"
TRAVEL_MODES = {DRIVING, WALKING}

# Modos do arquivo de lote
BATCH_MODE_DRIVING = "driving"
BATCH_MODE_ENVIRONMENTAL = "driving-walking"

# Tolerância (minutos) para agrupar alternativas acima do limite de caminhada
ENVIRONMENTAL_TOLERANCE = 2

# Marcador de segmento intransitável no CSV de distâncias
UNUSABLE_WEIGHT_TOKEN = "X"

# Colunas dos CSVs de entrada
LOCATION_COLUMNS = ("Location", "Id", "Code", "Parking")
DISTANCE_COLUMNS = ("Location1", "Location2", "Driving", "Walking")

# Arquivo onde os relatórios também são gravados
DEFAULT_OUTPUT_FILE = "output.txt"
