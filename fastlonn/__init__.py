"""Fastlønnskalkulator: lønn og feriepenger for fastlønnede i Norge."""
