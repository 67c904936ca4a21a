LANDING_PAGE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <title>Fun Facts Bot</title>
  </head>
  <body>
    <h1>Fun Facts Bot webhook</h1>
    <p>This service answers your chatbot with a fun fact about an animal.</p>
    <p>Point your bot's webhook at <code>POST /bot</code> and keep the user's pick in
    <code>memory.animal</code>. Each reply bumps <code>memory.funfacts</code> so the bot
    knows how many facts it has already shared.</p>
  </body>
</html>
"""
