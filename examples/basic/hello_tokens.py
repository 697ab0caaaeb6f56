"""Tokenize a scenario file and print the golden text form."""

from pepino import format_tokens, tokenize

source = """\
@smoke
Feature: Login
  Scenario: Logging in
    Given a registered user
    When I log in
    Then I see the dashboard
"""

print(format_tokens(tokenize(source)))
