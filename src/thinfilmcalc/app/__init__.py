"""
The APP layer drives the interactive session: the menu state machine, the
console presentation and the controller that ties them to the model.
"""
