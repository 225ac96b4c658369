"""
The CONTROLLER layer connects user input (text) with the model.
"""
