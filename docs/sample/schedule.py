sample_schedule_description = """
Return a demo schedule (5 wells, 5 crews, 10 equipment units) laid out around the
current time, ready to post to the other endpoints.
"""
