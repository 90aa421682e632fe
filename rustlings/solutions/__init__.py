"""Worked solutions to many of the exercises, as plain Python functions and classes."""