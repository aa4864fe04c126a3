# Routes module
