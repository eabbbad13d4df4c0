from telegram_schema.models.base import TelegramObject
from telegram_schema.models.bot import BotCommand, BotCommandScope, BotCommandScopeAllChatAdministrators, BotCommandScopeAllGroupChats, BotCommandScopeAllPrivateChats, BotCommandScopeChat, BotCommandScopeChatAdministrators, BotCommandScopeChatMember, BotCommandScopeDefault, BotCommandScopes, WebhookInfo
from telegram_schema.models.chat import ChatId, ChatKind, ChatLocation, ChatPermissions, ChatPhoto, ChatUser
from telegram_schema.models.chat_member import ChatInviteLink, ChatJoinRequest, ChatMember, ChatMemberAdministrator, ChatMemberBanned, ChatMemberLeft, ChatMemberMember, ChatMemberOwner, ChatMemberRestricted, ChatMembers, ChatMemberStatus, ChatMemberUpdated
from telegram_schema.models.entity import BoldKind, BotCommandKind, CashtagKind, CodeKind, CustomEmojiKind, EmailKind, EntityKind, EntityKinds, HashtagKind, ItalicKind, MentionKind, MessageEntity, PhoneNumberKind, PreKind, SpoilerKind, StrikethroughKind, TextLinkKind, TextMentionKind, UnderlineKind, UrlKind
from telegram_schema.models.keyboard import ForceReply, InlineKeyboardButton, InlineKeyboardMarkup, KeyboardButton, KeyboardButtonPollType, LoginUrl, ReplyKeyboardMarkup, ReplyKeyboardRemove, ReplyMarkup, ReplyMarkups, WebAppInfo
from telegram_schema.models.media import Animation, Audio, Contact, Dice, Document, File, Location, MaskPosition, PhotoSize, Sticker, Venue, Video, VideoNote, Voice
from telegram_schema.models.message import Caption, Chat, Message, MessageContent, MessageContents, MessageId
from telegram_schema.models.poll import Poll, PollAnswer, PollKind, PollKinds, PollOption, PollType, QuizPoll, RegularPoll
from telegram_schema.models.query import CallbackQuery, ChosenInlineResult, InlineQuery, PreCheckoutQuery, ShippingQuery
from telegram_schema.models.response import Response, ResponseParameters
from telegram_schema.models.update import Update, UpdateEvent, UpdateEvents, UpdateKind
from telegram_schema.models.user import User
