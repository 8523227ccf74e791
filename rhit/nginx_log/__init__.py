"""Finding, reading and parsing nginx access log files."""