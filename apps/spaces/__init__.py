"""Spaces app package.

Sports facilities that hosts list for hourly rental. The booking engine
reads a space's operating hours, hourly price and active flag; listing
management itself lives outside this project.
"""
