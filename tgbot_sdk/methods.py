"""One wrapper per Bot API method.

Every wrapper takes the same arguments as `TelegramClient.send_method()`
(except the method name) and returns what it returns: a resolved value for a
single parameter mapping, a dict of resolved values for a batch, or launch
flags in background mode. See https://core.telegram.org/bots/api.
"""

from abc import ABC, abstractmethod
from typing import Any

from tgbot_sdk._internal.dispatch.options import Options
from tgbot_sdk._internal.dispatch.params import Parameters
from tgbot_sdk.updates import UpdateContext


class BotMethodsMixin(ABC):
    """Bot API method wrappers, mixed into TelegramClient."""

    @abstractmethod
    def send_method(
        self,
        method_name: str,
        parameters: Parameters = None,
        options: Options = None,
        *,
        context: UpdateContext | None = None,
    ) -> Any:
        """Call one Bot API method; implemented by the client."""

    # =========================================================================
    # Getting updates
    # =========================================================================

    def get_updates(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getupdates"""
        return self.send_method("getUpdates", parameters, options, context=context)

    def set_webhook(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setwebhook"""
        return self.send_method("setWebhook", parameters, options, context=context)

    def delete_webhook(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#deletewebhook"""
        return self.send_method("deleteWebhook", parameters, options, context=context)

    def get_webhook_info(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getwebhookinfo"""
        return self.send_method("getWebhookInfo", parameters, options, context=context)

    # =========================================================================
    # Available methods
    # =========================================================================

    def get_me(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getme"""
        return self.send_method("getMe", parameters, options, context=context)

    def log_out(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#logout"""
        return self.send_method("logOut", parameters, options, context=context)

    def close_bot(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#close"""
        return self.send_method("close", parameters, options, context=context)

    def send_message(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendmessage"""
        return self.send_method("sendMessage", parameters, options, context=context)

    def forward_message(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#forwardmessage"""
        return self.send_method("forwardMessage", parameters, options, context=context)

    def forward_messages(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#forwardmessages"""
        return self.send_method("forwardMessages", parameters, options, context=context)

    def copy_message(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#copymessage"""
        return self.send_method("copyMessage", parameters, options, context=context)

    def send_photo(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendphoto"""
        return self.send_method("sendPhoto", parameters, options, context=context)

    def send_audio(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendaudio"""
        return self.send_method("sendAudio", parameters, options, context=context)

    def send_document(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#senddocument"""
        return self.send_method("sendDocument", parameters, options, context=context)

    def send_video(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendvideo"""
        return self.send_method("sendVideo", parameters, options, context=context)

    def send_animation(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendanimation"""
        return self.send_method("sendAnimation", parameters, options, context=context)

    def send_voice(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendvoice"""
        return self.send_method("sendVoice", parameters, options, context=context)

    def send_video_note(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendvideonote"""
        return self.send_method("sendVideoNote", parameters, options, context=context)

    def send_media_group(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendmediagroup"""
        return self.send_method("sendMediaGroup", parameters, options, context=context)

    def send_location(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendlocation"""
        return self.send_method("sendLocation", parameters, options, context=context)

    def send_venue(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendvenue"""
        return self.send_method("sendVenue", parameters, options, context=context)

    def send_contact(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendcontact"""
        return self.send_method("sendContact", parameters, options, context=context)

    def send_poll(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendpoll"""
        return self.send_method("sendPoll", parameters, options, context=context)

    def send_dice(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#senddice"""
        return self.send_method("sendDice", parameters, options, context=context)

    def send_chat_action(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendchataction"""
        return self.send_method("sendChatAction", parameters, options, context=context)

    def set_message_reaction(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setmessagereaction"""
        return self.send_method("setMessageReaction", parameters, options, context=context)

    def get_user_profile_photos(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getuserprofilephotos"""
        return self.send_method("getUserProfilePhotos", parameters, options, context=context)

    def get_file(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getfile"""
        return self.send_method("getFile", parameters, options, context=context)

    def ban_chat_member(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#banchatmember"""
        return self.send_method("banChatMember", parameters, options, context=context)

    def unban_chat_member(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#unbanchatmember"""
        return self.send_method("unbanChatMember", parameters, options, context=context)

    def restrict_chat_member(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#restrictchatmember"""
        return self.send_method("restrictChatMember", parameters, options, context=context)

    def promote_chat_member(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#promotechatmember"""
        return self.send_method("promoteChatMember", parameters, options, context=context)

    def set_chat_administrator_custom_title(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setchatadministratorcustomtitle"""
        return self.send_method("setChatAdministratorCustomTitle", parameters, options, context=context)

    def ban_chat_sender_chat(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#banchatsenderchat"""
        return self.send_method("banChatSenderChat", parameters, options, context=context)

    def unban_chat_sender_chat(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#unbanchatsenderchat"""
        return self.send_method("unbanChatSenderChat", parameters, options, context=context)

    def set_chat_permissions(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setchatpermissions"""
        return self.send_method("setChatPermissions", parameters, options, context=context)

    def export_chat_invite_link(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#exportchatinvitelink"""
        return self.send_method("exportChatInviteLink", parameters, options, context=context)

    def create_chat_invite_link(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#createchatinvitelink"""
        return self.send_method("createChatInviteLink", parameters, options, context=context)

    def edit_chat_invite_link(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#editchatinvitelink"""
        return self.send_method("editChatInviteLink", parameters, options, context=context)

    def revoke_chat_invite_link(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#revokechatinvitelink"""
        return self.send_method("revokeChatInviteLink", parameters, options, context=context)

    def approve_chat_join_request(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#approvechatjoinrequest"""
        return self.send_method("approveChatJoinRequest", parameters, options, context=context)

    def decline_chat_join_request(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#declinechatjoinrequest"""
        return self.send_method("declineChatJoinRequest", parameters, options, context=context)

    def set_chat_photo(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setchatphoto"""
        return self.send_method("setChatPhoto", parameters, options, context=context)

    def delete_chat_photo(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#deletechatphoto"""
        return self.send_method("deleteChatPhoto", parameters, options, context=context)

    def set_chat_title(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setchattitle"""
        return self.send_method("setChatTitle", parameters, options, context=context)

    def set_chat_description(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setchatdescription"""
        return self.send_method("setChatDescription", parameters, options, context=context)

    def pin_chat_message(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#pinchatmessage"""
        return self.send_method("pinChatMessage", parameters, options, context=context)

    def unpin_chat_message(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#unpinchatmessage"""
        return self.send_method("unpinChatMessage", parameters, options, context=context)

    def unpin_all_chat_messages(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#unpinallchatmessages"""
        return self.send_method("unpinAllChatMessages", parameters, options, context=context)

    def leave_chat(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#leavechat"""
        return self.send_method("leaveChat", parameters, options, context=context)

    def get_chat(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getchat"""
        return self.send_method("getChat", parameters, options, context=context)

    def get_chat_administrators(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getchatadministrators"""
        return self.send_method("getChatAdministrators", parameters, options, context=context)

    def get_chat_members_count(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getchatmemberscount"""
        return self.send_method("getChatMembersCount", parameters, options, context=context)

    def get_chat_member(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getchatmember"""
        return self.send_method("getChatMember", parameters, options, context=context)

    def set_chat_sticker_set(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setchatstickerset"""
        return self.send_method("setChatStickerSet", parameters, options, context=context)

    def delete_chat_sticker_set(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#deletechatstickerset"""
        return self.send_method("deleteChatStickerSet", parameters, options, context=context)

    def get_forum_topic_icon_stickers(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getforumtopiciconstickers"""
        return self.send_method("getForumTopicIconStickers", parameters, options, context=context)

    def create_forum_topic(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#createforumtopic"""
        return self.send_method("createForumTopic", parameters, options, context=context)

    def edit_forum_topic(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#editforumtopic"""
        return self.send_method("editForumTopic", parameters, options, context=context)

    def close_forum_topic(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#closeforumtopic"""
        return self.send_method("closeForumTopic", parameters, options, context=context)

    def reopen_forum_topic(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#reopenforumtopic"""
        return self.send_method("reopenForumTopic", parameters, options, context=context)

    def delete_forum_topic(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#deleteforumtopic"""
        return self.send_method("deleteForumTopic", parameters, options, context=context)

    def unpin_all_forum_topic_messages(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#unpinallforumtopicmessages"""
        return self.send_method("unpinAllForumTopicMessages", parameters, options, context=context)

    def edit_general_forum_topic(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#editgeneralforumtopic"""
        return self.send_method("editGeneralForumTopic", parameters, options, context=context)

    def close_general_forum_topic(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#closegeneralforumtopic"""
        return self.send_method("closeGeneralForumTopic", parameters, options, context=context)

    def reopen_general_forum_topic(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#reopengeneralforumtopic"""
        return self.send_method("reopenGeneralForumTopic", parameters, options, context=context)

    def hide_general_forum_topic(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#hidegeneralforumtopic"""
        return self.send_method("hideGeneralForumTopic", parameters, options, context=context)

    def unhide_general_forum_topic(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#unhidegeneralforumtopic"""
        return self.send_method("unhideGeneralForumTopic", parameters, options, context=context)

    def unpin_all_general_forum_topic_messages(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#unpinallgeneralforumtopicmessages"""
        return self.send_method("unpinAllGeneralForumTopicMessages", parameters, options, context=context)

    def answer_callback_query(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#answercallbackquery"""
        return self.send_method("answerCallbackQuery", parameters, options, context=context)

    def get_user_chat_boosts(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getuserchatboosts"""
        return self.send_method("getUserChatBoosts", parameters, options, context=context)

    def get_business_connection(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getbusinessconnection"""
        return self.send_method("getBusinessConnection", parameters, options, context=context)

    def set_my_commands(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setmycommands"""
        return self.send_method("setMyCommands", parameters, options, context=context)

    def delete_my_commands(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#deletemycommands"""
        return self.send_method("deleteMyCommands", parameters, options, context=context)

    def get_my_commands(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getmycommands"""
        return self.send_method("getMyCommands", parameters, options, context=context)

    def set_my_name(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setmyname"""
        return self.send_method("setMyName", parameters, options, context=context)

    def get_my_name(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getmyname"""
        return self.send_method("getMyName", parameters, options, context=context)

    def set_my_description(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setmydescription"""
        return self.send_method("setMyDescription", parameters, options, context=context)

    def get_my_description(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getmydescription"""
        return self.send_method("getMyDescription", parameters, options, context=context)

    def set_my_short_description(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setmyshortdescription"""
        return self.send_method("setMyShortDescription", parameters, options, context=context)

    def get_my_short_description(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getmyshortdescription"""
        return self.send_method("getMyShortDescription", parameters, options, context=context)

    def set_chat_menu_button(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setchatmenubutton"""
        return self.send_method("setChatMenuButton", parameters, options, context=context)

    def get_chat_menu_button(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getchatmenubutton"""
        return self.send_method("getChatMenuButton", parameters, options, context=context)

    def set_my_default_administrator_rights(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setmydefaultadministratorrights"""
        return self.send_method("setMyDefaultAdministratorRights", parameters, options, context=context)

    def get_my_default_administrator_rights(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getmydefaultadministratorrights"""
        return self.send_method("getMyDefaultAdministratorRights", parameters, options, context=context)

    # =========================================================================
    # Updating messages
    # =========================================================================

    def edit_message_text(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#editmessagetext"""
        return self.send_method("editMessageText", parameters, options, context=context)

    def edit_message_caption(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#editmessagecaption"""
        return self.send_method("editMessageCaption", parameters, options, context=context)

    def edit_message_media(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#editmessagemedia"""
        return self.send_method("editMessageMedia", parameters, options, context=context)

    def edit_message_live_location(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#editmessagelivelocation"""
        return self.send_method("editMessageLiveLocation", parameters, options, context=context)

    def stop_message_live_location(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#stopmessagelivelocation"""
        return self.send_method("stopMessageLiveLocation", parameters, options, context=context)

    def edit_message_reply_markup(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#editmessagereplymarkup"""
        return self.send_method("editMessageReplyMarkup", parameters, options, context=context)

    def stop_poll(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#stoppoll"""
        return self.send_method("stopPoll", parameters, options, context=context)

    def delete_message(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#deletemessage"""
        return self.send_method("deleteMessage", parameters, options, context=context)

    def delete_messages(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#deletemessages"""
        return self.send_method("deleteMessages", parameters, options, context=context)

    # =========================================================================
    # Stickers
    # =========================================================================

    def send_sticker(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendsticker"""
        return self.send_method("sendSticker", parameters, options, context=context)

    def get_sticker_set(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getstickerset"""
        return self.send_method("getStickerSet", parameters, options, context=context)

    def get_custom_emoji_stickers(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getcustomemojistickers"""
        return self.send_method("getCustomEmojiStickers", parameters, options, context=context)

    def upload_sticker_file(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#uploadstickerfile"""
        return self.send_method("uploadStickerFile", parameters, options, context=context)

    def create_new_sticker_set(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#createnewstickerset"""
        return self.send_method("createNewStickerSet", parameters, options, context=context)

    def add_sticker_to_set(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#addstickertoset"""
        return self.send_method("addStickerToSet", parameters, options, context=context)

    def set_sticker_position_in_set(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setstickerpositioninset"""
        return self.send_method("setStickerPositionInSet", parameters, options, context=context)

    def delete_sticker_from_set(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#deletestickerfromset"""
        return self.send_method("deleteStickerFromSet", parameters, options, context=context)

    def replace_sticker_in_set(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#replacestickerinset"""
        return self.send_method("replaceStickerInSet", parameters, options, context=context)

    def set_sticker_emoji_list(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setstickeremojilist"""
        return self.send_method("setStickerEmojiList", parameters, options, context=context)

    def set_sticker_keywords(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setstickerkeywords"""
        return self.send_method("setStickerKeywords", parameters, options, context=context)

    def set_sticker_mask_position(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setstickermaskposition"""
        return self.send_method("setStickerMaskPosition", parameters, options, context=context)

    def set_sticker_set_title(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setstickersettitle"""
        return self.send_method("setStickerSetTitle", parameters, options, context=context)

    def set_sticker_set_thumbnail(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setstickersetthumbnail"""
        return self.send_method("setStickerSetThumbnail", parameters, options, context=context)

    def set_sticker_set_thumb(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setstickersetthumb"""
        return self.send_method("setStickerSetThumb", parameters, options, context=context)

    def set_custom_emoji_sticker_set_thumbnail(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setcustomemojistickersetthumbnail"""
        return self.send_method("setCustomEmojiStickerSetThumbnail", parameters, options, context=context)

    def delete_sticker_set(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#deletestickerset"""
        return self.send_method("deleteStickerSet", parameters, options, context=context)

    # =========================================================================
    # Inline mode
    # =========================================================================

    def answer_inline_query(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#answerinlinequery"""
        return self.send_method("answerInlineQuery", parameters, options, context=context)

    def answer_web_app_query(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#answerwebappquery"""
        return self.send_method("answerWebAppQuery", parameters, options, context=context)

    # =========================================================================
    # Payments
    # =========================================================================

    def send_invoice(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendinvoice"""
        return self.send_method("sendInvoice", parameters, options, context=context)

    def create_invoice_link(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#createinvoicelink"""
        return self.send_method("createInvoiceLink", parameters, options, context=context)

    def answer_shipping_query(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#answershippingquery"""
        return self.send_method("answerShippingQuery", parameters, options, context=context)

    def answer_pre_checkout_query(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#answerprecheckoutquery"""
        return self.send_method("answerPreCheckoutQuery", parameters, options, context=context)

    # =========================================================================
    # Telegram Passport
    # =========================================================================

    def set_passport_data_errors(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setpassportdataerrors"""
        return self.send_method("setPassportDataErrors", parameters, options, context=context)

    # =========================================================================
    # Games
    # =========================================================================

    def send_game(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#sendgame"""
        return self.send_method("sendGame", parameters, options, context=context)

    def set_game_score(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#setgamescore"""
        return self.send_method("setGameScore", parameters, options, context=context)

    def get_game_high_scores(
        self, parameters: Parameters = None, options: Options = None, *, context: UpdateContext | None = None
    ) -> Any:
        """https://core.telegram.org/bots/api#getgamehighscores"""
        return self.send_method("getGameHighScores", parameters, options, context=context)
