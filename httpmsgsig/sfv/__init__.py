"""Structured Field Values: value types, scanner and limits, parser and serializer."""