"""Help command implementation."""

import discord

HELP_MESSAGE = (
    "📋 **คำสั่งที่ใช้ได้**\n\n"
    "`/start` - ตรวจสอบว่าบอททำงานอยู่\n"
    "`/bigmatch` หรือ `/today` - ส่งโปรแกรม Big Match วันนี้ "
    "เข้า Channel (ไทย) และ Group (ลาว)\n"
    "`/result` หรือ `/yesterday` - ส่งผล Big Match เมื่อคืน "
    "เข้า Channel (ไทย) และ Group (ลาว)\n"
    "`/help` - แสดงข้อความนี้"
)


async def help_command(interaction: discord.Interaction) -> None:
    """Show all available bot commands.

    Args:
        interaction: Discord interaction object.
    """
    await interaction.followup.send(HELP_MESSAGE, ephemeral=True)
