"""
GitMind Setup Wizard

Interactive first-run setup: widgets, screens and the orchestrator that
drives them. Import the orchestrator from gitmind.wizard.orchestrator.
"""
