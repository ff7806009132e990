from fastmcp import FastMCP

promptOpsMCPServer = FastMCP(
    name="promptops",
    instructions="Turns rough coding requests into agent-ready prompts: tweak suggestions, validation, message assembly and response parsing."
)

def serve():
    promptOpsMCPServer.run("stdio")

async def aserve():
    await promptOpsMCPServer.run_stdio_async()

if __name__ == "__main__":
    serve()
